from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from symbolexport import config
from symbolexport.config import PluginConfig
from tests.fakes import FakeDocument


class PluginConfigTests(unittest.TestCase):
    def test_paths_derive_from_plugin_dir(self) -> None:
        cfg = PluginConfig(document=FakeDocument(), plugin_dir=Path("/plugins/symbolexport"))
        self.assertEqual(cfg.index_html, Path("/plugins/symbolexport/app/webview/index.html"))
        self.assertEqual(cfg.symbol_data_path, Path("/plugins/symbolexport/app/webview/symbolData.js"))
        self.assertEqual(cfg.export_dir, Path("/plugins/symbolexport/export"))

    def test_output_dir_overrides_export_dir(self) -> None:
        cfg = PluginConfig(document=FakeDocument(), plugin_dir=Path("/p"), output_dir=Path("/out"))
        self.assertEqual(cfg.export_dir, Path("/out"))

    def test_default_plugin_dir_ships_index_html(self) -> None:
        cfg = PluginConfig(document=FakeDocument(), plugin_dir=config.default_plugin_dir())
        self.assertTrue(cfg.index_html.is_file())


class DefaultDocumentTests(unittest.TestCase):
    def test_missing_config_file_gives_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(config._load_default_document_from_config(Path(tmp) / ".symbolexport.cfg"))

    def test_config_file_pointing_at_existing_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            document = Path(tmp) / "icons.sketch"
            document.write_bytes(b"")
            cfg_path = Path(tmp) / ".symbolexport.cfg"
            cfg_path.write_text(f"{document}\n", encoding="utf-8")
            self.assertEqual(config._load_default_document_from_config(cfg_path), document.resolve())

    def test_config_file_pointing_at_missing_document_gives_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / ".symbolexport.cfg"
            cfg_path.write_text(str(Path(tmp) / "gone.sketch"), encoding="utf-8")
            self.assertIsNone(config._load_default_document_from_config(cfg_path))

    def test_home_config_is_used_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("symbolexport.config.Path.home", return_value=Path(tmp)):
                self.assertEqual(config._config_file_path(), Path(tmp) / ".symbolexport.cfg")
                self.assertIsNone(config._load_default_document_from_config())


if __name__ == "__main__":
    unittest.main()
