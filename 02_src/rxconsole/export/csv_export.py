"""CSV rendering of the message list."""

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..models import RxMessage

CSV_HEADER = ("id", "timestamp", "device", "msg_id", "message")
CSV_MEDIA_TYPE = "text/csv;charset=utf-8"
LINE_TERMINATOR = "\n"


@dataclass(frozen=True)
class CsvExport:
    """A rendered export ready to be downloaded."""

    filename: str
    content: str
    row_count: int
    media_type: str = CSV_MEDIA_TYPE

    def encode(self) -> bytes:
        return self.content.encode("utf-8")


def format_cell(value: Any) -> str:
    """Render one JSON value the way the browser console stringifies it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def message_row(message: RxMessage) -> list[str]:
    return [
        format_cell(message.id),
        format_cell(message.timestamp),
        format_cell(message.device),
        format_cell(message.msg_id),
        format_cell(message.message).replace("\n", " "),
    ]


def render_csv(messages: Sequence[RxMessage]) -> str:
    """Render header plus one row per message, every field quoted.

    Rows keep the list order and are joined by "\\n" with no trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        quoting=csv.QUOTE_ALL,
        doublequote=True,
        lineterminator=LINE_TERMINATOR,
    )
    writer.writerow(CSV_HEADER)
    writer.writerows(message_row(message) for message in messages)
    return buffer.getvalue()[: -len(LINE_TERMINATOR)]


def export_filename(generated_at: datetime | None = None) -> str:
    """rx_messages_<UTC ISO timestamp truncated to whole seconds>.csv"""
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    else:
        generated_at = generated_at.astimezone(timezone.utc)
    return f"rx_messages_{generated_at.strftime('%Y-%m-%dT%H:%M:%S')}.csv"


def build_export(
    messages: Sequence[RxMessage], generated_at: datetime | None = None
) -> CsvExport | None:
    """Build a CsvExport, or None when there is nothing to export."""
    if not messages:
        return None
    return CsvExport(
        filename=export_filename(generated_at),
        content=render_csv(messages),
        row_count=len(messages),
    )
