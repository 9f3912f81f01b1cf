"""Export/clipboard service over the current message list."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from ..logging_config import get_logger
from ..models import RxMessage
from ..tracker import ITracker
from .clipboard import IClipboard
from .csv_export import CsvExport, build_export

logger = get_logger(__name__)


class IExportService(Protocol):
    """Operator-triggered exports of the message list."""

    async def export_csv(
        self, messages: Sequence[RxMessage], generated_at: datetime | None = None
    ) -> CsvExport | None:
        """Render the CSV download, or None for an empty list."""
        ...

    async def copy_last(self, messages: Sequence[RxMessage]) -> bool:
        """Copy the newest message text. Return False for an empty list."""
        ...


class ExportService:
    """CSV export and copy-last-message actions."""

    def __init__(self, clipboard: IClipboard, tracker: ITracker | None = None):
        self._clipboard = clipboard
        self._tracker = tracker

    async def export_csv(
        self, messages: Sequence[RxMessage], generated_at: datetime | None = None
    ) -> CsvExport | None:
        export = build_export(messages, generated_at)
        if export is None:
            return None

        logger.info("Exported %d messages to %s", export.row_count, export.filename)
        if self._tracker:
            await self._tracker.track(
                "csv_exported",
                "export_service",
                {"filename": export.filename, "row_count": export.row_count},
            )
        return export

    async def copy_last(self, messages: Sequence[RxMessage]) -> bool:
        if not messages:
            return False

        text = messages[0].text
        try:
            await self._clipboard.write_text(text)
        except Exception as e:
            # Clipboard is a convenience; the operator gets no error for it
            logger.debug("Clipboard write failed: %s", e)
            return True

        if self._tracker:
            await self._tracker.track(
                "message_copied",
                "export_service",
                {"key": messages[0].key, "length": len(text)},
            )
        return True
