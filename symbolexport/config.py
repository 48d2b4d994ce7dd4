"""Plugin configuration and on-disk defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .host import HostDocument

CONFIG_FILE_NAME = ".symbolexport.cfg"
WEBVIEW_SUBDIR = Path("app") / "webview"
INDEX_HTML_NAME = "index.html"
SYMBOL_DATA_NAME = "symbolData.js"
EXPORT_SUBDIR = "export"


def default_plugin_dir() -> Path:
    return Path(__file__).resolve().parent


def _config_file_path() -> Path:
    return Path.home() / CONFIG_FILE_NAME


def _load_default_document_from_config(cfg_path: Path | None = None) -> Path | None:
    """Resolve the document to open when no CLI path is provided."""
    cfg_path = cfg_path or _config_file_path()
    try:
        if not cfg_path.exists():
            return None
        raw = cfg_path.read_text(encoding="utf-8").strip()
        if not raw:
            return None
        candidate = Path(raw).expanduser()
        if candidate.is_file():
            return candidate.resolve()
    except OSError:
        # Unreadable config behaves like a missing one.
        pass
    return None


@dataclass(frozen=True)
class PluginConfig:
    document: HostDocument
    plugin_dir: Path
    output_dir: Path | None = None

    @property
    def webview_dir(self) -> Path:
        return self.plugin_dir / WEBVIEW_SUBDIR

    @property
    def index_html(self) -> Path:
        return self.webview_dir / INDEX_HTML_NAME

    @property
    def symbol_data_path(self) -> Path:
        return self.webview_dir / SYMBOL_DATA_NAME

    @property
    def export_dir(self) -> Path:
        if self.output_dir is not None:
            return self.output_dir
        return self.plugin_dir / EXPORT_SUBDIR
