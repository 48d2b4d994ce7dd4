"""Qt window hosting the symbol list webview."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QColor, QGuiApplication, QIcon, QPainter, QPen, QPixmap
from PySide6.QtWebEngineCore import QWebEnginePage, QWebEngineSettings
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QLayout, QMainWindow

from .host import NavigationObserver

WINDOW_TITLE = "Symbol Export"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800


def _build_symbol_icon() -> QIcon:
    """Return a drawn icon: a rounded tile with a stacked-symbol glyph."""
    pixmap = QPixmap(64, 64)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor("#f7a21b"))
    painter.drawRoundedRect(4, 4, 56, 56, 10, 10)

    pen = QPen(QColor("#ffffff"))
    pen.setWidth(4)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    painter.setPen(pen)
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawRect(16, 16, 22, 22)
    painter.drawRect(26, 26, 22, 22)
    painter.end()
    return QIcon(pixmap)


class SymbolExportPage(QWebEnginePage):
    """Web page that reports every navigation attempt to an observer.

    Navigations the observer acts on are blocked; all others proceed.
    """

    def __init__(self, on_navigation: NavigationObserver, parent=None):
        super().__init__(parent)
        self._on_navigation = on_navigation

    def acceptNavigationRequest(self, url, nav_type, is_main_frame):  # noqa: N802 - Qt override
        target = url.toString() if isinstance(url, QUrl) else str(url)
        if self._on_navigation(self, target):
            return False
        return super().acceptNavigationRequest(url, nav_type, is_main_frame)


class SymbolExportWindow(QMainWindow):
    def __init__(self, index_html: Path, on_navigation: NavigationObserver):
        super().__init__()
        self.index_html = index_html
        self.setWindowTitle(WINDOW_TITLE)
        self.setWindowIcon(_build_symbol_icon())
        self.setWindowFlags(
            Qt.WindowType.Window
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.WindowCloseButtonHint
        )

        self.view = QWebEngineView(self)
        self.page = SymbolExportPage(on_navigation, self.view)
        self.view.setPage(self.page)
        # The list page is a local file that loads its data as a sibling script.
        view_settings = self.view.settings()
        view_settings.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls, True)
        self.view.loadFinished.connect(self._on_load_finished)
        self.view.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setCentralWidget(self.view)
        # Window size follows the fixed view plus the status bar.
        self.layout().setSizeConstraint(QLayout.SizeConstraint.SetFixedSize)
        self.statusBar().showMessage(f"Loading {self.index_html.name}...")

        self.view.setUrl(QUrl.fromLocalFile(str(self.index_html)))

    def _on_load_finished(self, ok: bool) -> None:
        if ok:
            self.statusBar().showMessage("Ready", 3000)
        else:
            self.statusBar().showMessage(f"Could not load {self.index_html}", 5000)
            print(f"symbolexport: failed to load {self.index_html}", file=sys.stderr)

    def center_on_screen(self) -> None:
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def present(self) -> None:
        self.show()
        self.center_on_screen()
        self.raise_()
        self.activateWindow()


class QtHostUI:
    """Creates the plugin window on the running Qt application."""

    def open_window(self, index_html: Path, on_navigation: NavigationObserver) -> SymbolExportWindow:
        window = SymbolExportWindow(index_html, on_navigation)
        window.present()
        return window
