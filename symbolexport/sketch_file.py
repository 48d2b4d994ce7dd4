"""Standalone host document backed by a ``.sketch`` archive.

A ``.sketch`` file is a ZIP holding ``document.json`` (which lists page
references in order) and one ``pages/<id>.json`` per page.
"""

from __future__ import annotations

import json
import sys
import zipfile
from pathlib import Path
from typing import Any, Callable, Iterator

from .host import ExportRequest, HostSymbol

SYMBOL_MASTER_CLASS = "symbolMaster"


class SketchFileError(ValueError):
    """Raised when an archive cannot be read as a Sketch document."""


class SketchLayer:
    def __init__(self, data: dict[str, Any]):
        self.data = data

    @property
    def layer_class(self) -> str:
        return str(self.data.get("_class", ""))

    @property
    def name(self) -> str:
        return str(self.data.get("name", ""))

    @property
    def symbol_id(self) -> str:
        return str(self.data.get("symbolID", ""))

    def is_symbol_master(self) -> bool:
        return self.layer_class == SYMBOL_MASTER_CLASS

    def __repr__(self) -> str:
        return f"SketchLayer({self.layer_class!r}, {self.name!r})"


class SketchPage:
    def __init__(self, data: dict[str, Any]):
        self.data = data

    @property
    def name(self) -> str:
        return str(self.data.get("name", ""))

    def layers(self) -> Iterator[SketchLayer]:
        for layer in self.data.get("layers") or []:
            if isinstance(layer, dict):
                yield SketchLayer(layer)


def _print_message(text: str) -> None:
    print(text, file=sys.stderr)


class SketchDocument:
    """Read-only view of a Sketch archive that can rasterize its layers."""

    def __init__(self, path: Path, pages: list[SketchPage], message_sink: Callable[[str], None] | None = None):
        self.path = path
        self._pages = pages
        self.message_sink = message_sink or _print_message

    @classmethod
    def open(cls, path: Path) -> "SketchDocument":
        path = Path(path)
        try:
            with zipfile.ZipFile(path) as archive:
                document = _read_json_member(archive, "document.json")
                pages = [SketchPage(_read_json_member(archive, ref)) for ref in _page_refs(document)]
        except zipfile.BadZipFile as exc:
            raise SketchFileError(f"{path} is not a Sketch archive") from exc
        return cls(path, pages)

    def pages(self) -> list[SketchPage]:
        return list(self._pages)

    def export_request(self, symbol: HostSymbol, *, trimmed: bool = True, scale: float = 1.0) -> ExportRequest:
        if scale <= 0:
            raise ValueError(f"Export scale must be positive, got {scale}")
        return ExportRequest(layer=symbol, trimmed=trimmed, scale=scale)

    def save_export(self, request: ExportRequest, path: Path) -> None:
        # Qt is only needed once something is rasterized.
        from .render import render_to_file

        render_to_file(request, path)

    def show_message(self, text: str) -> None:
        self.message_sink(text)


def _page_refs(document: dict[str, Any]) -> list[str]:
    refs = []
    for entry in document.get("pages") or []:
        ref = entry.get("_ref") if isinstance(entry, dict) else None
        if not isinstance(ref, str) or not ref:
            raise SketchFileError("document.json has a page entry without a _ref")
        refs.append(ref if ref.endswith(".json") else f"{ref}.json")
    return refs


def _read_json_member(archive: zipfile.ZipFile, member: str) -> dict[str, Any]:
    try:
        raw = archive.read(member)
    except KeyError as exc:
        raise SketchFileError(f"Missing archive member: {member}") from exc
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SketchFileError(f"Invalid JSON in {member}: {exc}") from exc
    if not isinstance(data, dict):
        raise SketchFileError(f"{member} does not contain a JSON object")
    return data
