"""Plugin entrypoint: catalog, data file, window, export on request."""

from __future__ import annotations

import logging

from .catalog import SymbolCatalog, build_catalog, write_symbol_data
from .config import PluginConfig
from .exporter import ExportResult, export_all
from .host import HostUI, HostWindow
from .trigger import ExportTrigger

DONE_MESSAGE = "Done!"

logger = logging.getLogger(__name__)


class SymbolExportPlugin:
    def __init__(self, config: PluginConfig):
        self.config = config
        self.catalog: SymbolCatalog = ()
        self.window: HostWindow | None = None
        self.last_result: ExportResult | None = None
        self.trigger = ExportTrigger(self.export, self.finish)

    def prepare(self) -> SymbolCatalog:
        """Snapshot the catalog and write the webview data file.

        Runs before any window exists, so the user cannot change the document
        between cataloguing and export.
        """
        self.catalog = build_catalog(self.config.document)
        write_symbol_data(self.catalog, self.config.symbol_data_path)
        return self.catalog

    def export(self) -> ExportResult:
        self.last_result = export_all(self.catalog, self.config.document, self.config.export_dir)
        return self.last_result

    def finish(self) -> None:
        if self.window is not None:
            self.window.close()
        self.config.document.show_message(DONE_MESSAGE)

    def run(self, ui: HostUI) -> HostWindow:
        self.prepare()
        logger.debug("opening %s", self.config.index_html)
        self.window = ui.open_window(self.config.index_html, self.trigger.handle_navigation)
        return self.window
