"""Export every catalogued symbol to ``<symbolId>.png``."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from .catalog import SymbolCatalog
from .host import HostDocument

EXPORT_SCALE = 1.0

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    output_dir: Path
    written: list[Path] = field(default_factory=list)


def export_all(catalog: SymbolCatalog, document: HostDocument, output_dir: Path) -> ExportResult:
    """Rasterize each entry in catalog order using the retained host handle.

    Host faults are not caught. A failure on one symbol stops the batch and
    leaves files already written in place.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    result = ExportResult(output_dir=output_dir)
    for entry in catalog:
        request = document.export_request(entry.symbol, trimmed=True, scale=EXPORT_SCALE)
        target = output_dir / f"{entry.record.symbol_id}.png"
        document.save_export(request, target)
        result.written.append(target)
        logger.debug("exported %s -> %s", entry.record.name, target)
    logger.info("exported %d symbol(s) to %s", len(result.written), output_dir)
    return result
