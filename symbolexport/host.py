"""Read-only capability protocols for the host document.

The plugin never owns the document model. Everything it needs from the host
is listed here, so catalog and export logic can run against any object that
offers the same surface (a live host, a ``.sketch`` archive, or a test fake).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Protocol


class HostLayer(Protocol):
    def is_symbol_master(self) -> bool: ...


class HostSymbol(HostLayer, Protocol):
    name: str
    symbol_id: str


class HostPage(Protocol):
    def layers(self) -> Iterable[HostLayer]: ...


@dataclass(frozen=True)
class ExportRequest:
    """Describes how one layer should be rasterized."""

    layer: HostSymbol
    trimmed: bool = True
    scale: float = 1.0
    file_format: str = "png"


class HostDocument(Protocol):
    def pages(self) -> Iterable[HostPage]: ...

    def export_request(self, symbol: HostSymbol, *, trimmed: bool = True, scale: float = 1.0) -> ExportRequest: ...

    def save_export(self, request: ExportRequest, path: Path) -> None: ...

    def show_message(self, text: str) -> None: ...


class HostWindow(Protocol):
    def close(self) -> bool: ...


NavigationObserver = Callable[[Any, str], bool]


class HostUI(Protocol):
    def open_window(self, index_html: Path, on_navigation: NavigationObserver) -> HostWindow: ...
