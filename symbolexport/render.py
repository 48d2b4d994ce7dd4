"""Best-effort QPainter rasterizer for Sketch layer trees."""

from __future__ import annotations

import math
import re
import sys
from pathlib import Path
from typing import Any

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPainterPath, QPen, QPolygonF

from .host import ExportRequest

_POINT_RE = re.compile(r"\{\s*([-+0-9.eE]+)\s*,\s*([-+0-9.eE]+)\s*\}")
_CONTAINER_CLASSES = {"group", "shapeGroup", "symbolMaster", "artboard"}
_PATH_CLASSES = {"shapePath", "triangle", "star", "polygon"}


def _color(data: dict[str, Any] | None) -> QColor | None:
    if not isinstance(data, dict):
        return None
    try:
        return QColor.fromRgbF(
            float(data.get("red", 0.0)),
            float(data.get("green", 0.0)),
            float(data.get("blue", 0.0)),
            float(data.get("alpha", 1.0)),
        )
    except (TypeError, ValueError):
        return None


def _first_enabled(entries: list[dict[str, Any]] | None) -> dict[str, Any] | None:
    for entry in entries or []:
        if isinstance(entry, dict) and entry.get("isEnabled", True):
            return entry
    return None


def _frame(data: dict[str, Any]) -> QRectF:
    frame = data.get("frame") or {}
    return QRectF(
        float(frame.get("x", 0.0)),
        float(frame.get("y", 0.0)),
        float(frame.get("width", 0.0)),
        float(frame.get("height", 0.0)),
    )


def _parse_point(text: Any, width: float, height: float) -> QPointF | None:
    match = _POINT_RE.match(str(text or ""))
    if match is None:
        return None
    return QPointF(float(match.group(1)) * width, float(match.group(2)) * height)


def _shape_path(data: dict[str, Any], rect: QRectF) -> QPainterPath:
    path = QPainterPath()
    layer_class = data.get("_class")
    if layer_class == "rectangle":
        radius = float(data.get("fixedRadius") or 0.0)
        if radius > 0:
            path.addRoundedRect(rect, radius, radius)
        else:
            path.addRect(rect)
        return path
    if layer_class == "oval":
        path.addEllipse(rect)
        return path

    # Curves are flattened to their anchor points.
    points = []
    for point in data.get("points") or []:
        parsed = _parse_point(point.get("point") if isinstance(point, dict) else None, rect.width(), rect.height())
        if parsed is not None:
            points.append(parsed + rect.topLeft())
    if len(points) >= 2:
        path.addPolygon(QPolygonF(points))
        if data.get("isClosed", True):
            path.closeSubpath()
    else:
        path.addRect(rect)
    return path


def _paint_style(painter: QPainter, data: dict[str, Any], path: QPainterPath) -> None:
    style = data.get("style") or {}
    fill = _first_enabled(style.get("fills"))
    border = _first_enabled(style.get("borders"))
    fill_color = _color(fill.get("color")) if fill else None
    if fill_color is not None:
        painter.fillPath(path, QBrush(fill_color))
    border_color = _color(border.get("color")) if border else None
    if border_color is not None:
        pen = QPen(border_color)
        pen.setWidthF(float(border.get("thickness", 1.0)))
        painter.strokePath(path, pen)


def _paint_text(painter: QPainter, data: dict[str, Any], rect: QRectF) -> None:
    attributed = data.get("attributedString") or {}
    text = str(attributed.get("string", ""))
    if not text:
        return
    attributes = ((data.get("style") or {}).get("textStyle") or {}).get("encodedAttributes") or {}
    font_attrs = (attributes.get("MSAttributedStringFontAttribute") or {}).get("attributes") or {}
    font = QFont()
    size = font_attrs.get("size")
    if isinstance(size, (int, float)) and size > 0:
        font.setPixelSize(max(1, int(round(size))))
    painter.setFont(font)
    color = _color(attributes.get("MSAttributedStringColorAttribute")) or QColor("#000000")
    painter.setPen(color)
    flags = int(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop) | int(Qt.TextFlag.TextWordWrap)
    painter.drawText(rect, flags, text)


def _paint_layer(painter: QPainter, data: dict[str, Any], origin: QPointF) -> None:
    if not data.get("isVisible", True):
        return
    rect = _frame(data).translated(origin)
    opacity = ((data.get("style") or {}).get("contextSettings") or {}).get("opacity")
    painter.save()
    if isinstance(opacity, (int, float)):
        painter.setOpacity(painter.opacity() * float(opacity))

    layer_class = data.get("_class")
    if layer_class == "text":
        _paint_text(painter, data, rect)
    elif layer_class in ("rectangle", "oval") or layer_class in _PATH_CLASSES:
        _paint_style(painter, data, _shape_path(data, rect))
    elif layer_class in _CONTAINER_CLASSES:
        if layer_class == "shapeGroup":
            _paint_style(painter, data, _shape_path({"_class": "rectangle"}, rect))
        for child in data.get("layers") or []:
            if isinstance(child, dict):
                _paint_layer(painter, child, rect.topLeft())
    painter.restore()


def _trim_transparent(image: QImage) -> QImage:
    """Crop to the bounding box of non-transparent pixels.

    Scans one alpha row at a time as bytes; ARGB32 stores each pixel as a
    native-endian 32-bit word, so alpha is the last byte on little-endian.
    """
    image = image.convertToFormat(QImage.Format.Format_ARGB32)
    w = image.width()
    h = image.height()
    stride = image.bytesPerLine()
    data = bytes(image.constBits())[: stride * h]
    alpha_offset = 3 if sys.byteorder == "little" else 0

    minx, miny = w, h
    maxx, maxy = -1, -1
    for y in range(h):
        start = y * stride + alpha_offset
        alpha = data[start : start + 4 * w : 4]
        remainder = alpha.lstrip(b"\x00")
        if not remainder:
            continue
        minx = min(minx, w - len(remainder))
        maxx = max(maxx, len(alpha.rstrip(b"\x00")) - 1)
        if y < miny:
            miny = y
        maxy = y

    if maxx < minx or maxy < miny:
        return image
    return image.copy(minx, miny, maxx - minx + 1, maxy - miny + 1)



def render_layer(data: dict[str, Any], *, trimmed: bool = True, scale: float = 1.0) -> QImage:
    frame = _frame(data)
    width = max(1, math.ceil(frame.width() * scale))
    height = max(1, math.ceil(frame.height() * scale))
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.scale(scale, scale)
    background = _color(data.get("backgroundColor"))
    if background is not None and data.get("hasBackgroundColor") and data.get("includeBackgroundColorInExport", True):
        painter.fillRect(QRectF(0, 0, frame.width(), frame.height()), QBrush(background))
    for child in data.get("layers") or []:
        if isinstance(child, dict):
            _paint_layer(painter, child, QPointF(0, 0))
    painter.end()

    return _trim_transparent(image) if trimmed else image


def render_to_file(request: ExportRequest, path: Path) -> None:
    data = getattr(request.layer, "data", None)
    if not isinstance(data, dict):
        raise TypeError(f"Cannot rasterize {request.layer!r}: no layer data")
    image = render_layer(data, trimmed=request.trimmed, scale=request.scale)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not image.save(str(path), request.file_format.upper()):
        raise OSError(f"Could not write {path}")
