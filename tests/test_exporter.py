from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from symbolexport.catalog import build_catalog
from symbolexport.exporter import export_all
from tests.fakes import FakeDocument, FakePage, FakeSymbol, two_page_document


class ExportAllTests(unittest.TestCase):
    def test_two_page_document_writes_one_png_per_symbol_id(self) -> None:
        document = two_page_document()
        with tempfile.TemporaryDirectory() as tmp:
            output_dir = Path(tmp) / "export"
            result = export_all(build_catalog(document), document, output_dir)

            self.assertEqual(sorted(p.name for p in output_dir.iterdir()), ["A1.png", "B2.png"])
            self.assertEqual(result.written, [output_dir / "A1.png", output_dir / "B2.png"])

    def test_name_collisions_still_produce_distinct_files(self) -> None:
        document = FakeDocument(
            FakePage(FakeSymbol("Icon", "1"), FakeSymbol("Icon", "2")),
            FakePage(FakeSymbol("Icon", "3")),
        )
        with tempfile.TemporaryDirectory() as tmp:
            output_dir = Path(tmp)
            export_all(build_catalog(document), document, output_dir)
            self.assertEqual(sorted(p.name for p in output_dir.iterdir()), ["1.png", "2.png", "3.png"])

    def test_requests_are_trimmed_at_unit_scale(self) -> None:
        document = two_page_document()
        with tempfile.TemporaryDirectory() as tmp:
            export_all(build_catalog(document), document, Path(tmp))
        self.assertEqual([(r.trimmed, r.scale) for r in document.requests], [(True, 1.0), (True, 1.0)])

    def test_existing_files_are_overwritten(self) -> None:
        document = two_page_document()
        with tempfile.TemporaryDirectory() as tmp:
            stale = Path(tmp) / "A1.png"
            stale.write_bytes(b"stale")
            export_all(build_catalog(document), document, Path(tmp))
            self.assertNotEqual(stale.read_bytes(), b"stale")

    def test_host_fault_aborts_batch_and_keeps_written_files(self) -> None:
        document = FakeDocument(FakePage(FakeSymbol("a", "1"), FakeSymbol("b", "2"), FakeSymbol("c", "3")), fail_on="2")
        with tempfile.TemporaryDirectory() as tmp:
            output_dir = Path(tmp)
            with self.assertRaises(RuntimeError):
                export_all(build_catalog(document), document, output_dir)
            self.assertEqual(sorted(p.name for p in output_dir.iterdir()), ["1.png"])

    def test_empty_catalog_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output_dir = Path(tmp) / "export"
            result = export_all((), FakeDocument(), output_dir)
            self.assertEqual(result.written, [])
            self.assertEqual(list(output_dir.iterdir()), [])


if __name__ == "__main__":
    unittest.main()
