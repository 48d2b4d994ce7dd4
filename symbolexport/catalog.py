"""Symbol catalog: flat, ordered symbol-master records for one document."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path

from .host import HostDocument, HostSymbol

SYMBOL_DATA_VARIABLE = "symbolData"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolRecord:
    name: str
    symbol_id: str
    symbol_index: int

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "symbolId": self.symbol_id, "symbolIndex": self.symbol_index}


@dataclass(frozen=True)
class CatalogEntry:
    """A record plus the host handle it was read from."""

    record: SymbolRecord
    symbol: HostSymbol


SymbolCatalog = tuple[CatalogEntry, ...]


def build_catalog(document: HostDocument) -> SymbolCatalog:
    """Collect symbol masters page by page, layer by layer.

    Only the layers each page exposes directly are visited. Visibility,
    locking and artboard membership are not considered.
    """
    entries: list[CatalogEntry] = []
    for page in document.pages():
        for layer in page.layers():
            if not layer.is_symbol_master():
                continue
            record = SymbolRecord(
                name=str(layer.name),
                symbol_id=str(layer.symbol_id),
                symbol_index=len(entries),
            )
            entries.append(CatalogEntry(record=record, symbol=layer))
    logger.debug("catalogued %d symbol master(s)", len(entries))
    return tuple(entries)


def catalog_records(catalog: SymbolCatalog) -> list[SymbolRecord]:
    return [entry.record for entry in catalog]


def serialize_catalog(catalog: SymbolCatalog) -> str:
    """Return a script assigning the catalog to the ``symbolData`` variable."""
    payload = [entry.record.to_payload() for entry in catalog]
    return f"var {SYMBOL_DATA_VARIABLE} = {json.dumps(payload, ensure_ascii=False)};\n"


def parse_symbol_data(text: str) -> list[dict]:
    """Read back a payload produced by :func:`serialize_catalog`."""
    prefix = f"var {SYMBOL_DATA_VARIABLE} ="
    body = text.strip()
    if not body.startswith(prefix):
        raise ValueError(f"Not a {SYMBOL_DATA_VARIABLE} script")
    body = body[len(prefix) :].strip()
    if body.endswith(";"):
        body = body[:-1]
    data = json.loads(body)
    if not isinstance(data, list):
        raise ValueError(f"{SYMBOL_DATA_VARIABLE} is not a list")
    return data


def write_symbol_data(catalog: SymbolCatalog, path: Path) -> Path:
    """Overwrite ``path`` with the serialized catalog (last write wins)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_catalog(catalog), encoding="utf-8")
    logger.info("wrote %d symbol record(s) to %s", len(catalog), path)
    return path
