"""Command-line entrypoint for running the plugin outside a design host."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalog import build_catalog, serialize_catalog
from .config import PluginConfig, _load_default_document_from_config, default_plugin_dir
from .sketch_file import SketchDocument, SketchFileError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbolexport",
        description="List the symbol masters of a Sketch document and export them as PNG images.",
    )
    parser.add_argument(
        "document",
        nargs="?",
        default=None,
        help="Sketch document to open (default: path stored in ~/.symbolexport.cfg).",
    )
    parser.add_argument("--output", default=None, help="Directory for exported PNGs (default: <plugin-dir>/export).")
    parser.add_argument("--plugin-dir", default=None, help="Directory holding app/webview/index.html.")
    parser.add_argument("--list", action="store_true", help="Print the symbol data script and exit.")
    parser.add_argument("--export-now", action="store_true", help="Export every symbol without opening the window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def _ensure_gui_app():
    """Return the running Qt application, creating a windowless one if needed."""
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    app.setApplicationName("symbolexport")
    return app


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    path = Path(args.document).expanduser() if args.document is not None else _load_default_document_from_config()
    if path is None:
        print("No document given and no default in ~/.symbolexport.cfg", file=sys.stderr)
        return 2
    if not path.is_file():
        print(f"Document does not exist: {path}", file=sys.stderr)
        return 2
    try:
        document = SketchDocument.open(path)
    except (OSError, SketchFileError) as exc:
        print(f"Could not open {path}: {exc}", file=sys.stderr)
        return 2

    if args.list:
        sys.stdout.write(serialize_catalog(build_catalog(document)))
        return 0

    plugin_dir = Path(args.plugin_dir).expanduser().resolve() if args.plugin_dir else default_plugin_dir()
    output_dir = Path(args.output).expanduser().resolve() if args.output else None
    config = PluginConfig(document=document, plugin_dir=plugin_dir, output_dir=output_dir)

    # Imported late so --list works without a display.
    from .plugin import SymbolExportPlugin

    plugin = SymbolExportPlugin(config)
    if args.export_now:
        _ensure_gui_app()
        plugin.prepare()
        plugin.export()
        plugin.finish()
        return 0

    from PySide6.QtWidgets import QApplication

    from .window import QtHostUI

    app = QApplication(sys.argv[:1])
    app.setApplicationName("symbolexport")
    plugin.run(QtHostUI())
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
