"""symbolexport: list a design document's symbol masters and export them as PNGs."""

from __future__ import annotations

from .catalog import CatalogEntry, SymbolRecord, build_catalog, serialize_catalog, write_symbol_data
from .exporter import ExportResult, export_all
from .trigger import EXPORT_TRIGGER_URL, ExportTrigger


def main(*args, **kwargs):
    """Lazily import the CLI so the package imports without Qt."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "CatalogEntry",
    "EXPORT_TRIGGER_URL",
    "ExportResult",
    "ExportTrigger",
    "SymbolRecord",
    "build_catalog",
    "export_all",
    "main",
    "serialize_catalog",
    "write_symbol_data",
]
