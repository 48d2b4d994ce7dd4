"""Navigation-driven export trigger.

The webview front-end asks for an export by navigating to a private sentinel
address. Nothing listens there; the address is only matched in-process.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable

EXPORT_TRIGGER_URL = "https://localhost:8080/symbolexport"

logger = logging.getLogger(__name__)


class TriggerState(enum.Enum):
    IDLE = "idle"
    EXPORTING = "exporting"


class ExportTrigger:
    """Two-state machine: ``IDLE`` until the sentinel URL is seen, then done."""

    def __init__(self, on_export: Callable[[], Any], on_complete: Callable[[], Any] | None = None):
        self._on_export = on_export
        self._on_complete = on_complete
        self.state = TriggerState.IDLE

    def matches(self, target_url) -> bool:
        return str(target_url) == EXPORT_TRIGGER_URL

    def handle_navigation(self, source, target_url) -> bool:
        """Return True when this navigation started the export."""
        if self.state is not TriggerState.IDLE or not self.matches(target_url):
            return False
        logger.info("export requested by %r", source)
        self.state = TriggerState.EXPORTING
        self._on_export()
        if self._on_complete is not None:
            self._on_complete()
        return True
