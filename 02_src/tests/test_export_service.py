"""Tests for ExportService and clipboards."""

import subprocess
from unittest.mock import patch

import pytest

from rxconsole.export import ClipboardError, ExportService, SystemClipboard
from rxconsole.models import RxMessage


class FailingClipboard:
    """Clipboard that always fails."""

    def __init__(self):
        self.attempts = 0

    async def write_text(self, text: str) -> None:
        self.attempts += 1
        raise ClipboardError("denied")


class TestCopyLast:
    """Tests for ExportService.copy_last()."""

    @pytest.mark.asyncio
    async def test_empty_list_writes_nothing(self, memory_clipboard):
        service = ExportService(clipboard=memory_clipboard)

        copied = await service.copy_last([])

        assert copied is False
        assert memory_clipboard.writes == 0
        assert memory_clipboard.text is None

    @pytest.mark.asyncio
    async def test_copies_newest_message_verbatim(self, memory_clipboard):
        service = ExportService(clipboard=memory_clipboard)
        messages = [
            RxMessage(id=2, message="newest\nline two"),
            RxMessage(id=1, message="older"),
        ]

        copied = await service.copy_last(messages)

        assert copied is True
        assert memory_clipboard.text == "newest\nline two"
        assert memory_clipboard.writes == 1

    @pytest.mark.asyncio
    async def test_missing_message_copies_empty_text(self, memory_clipboard):
        service = ExportService(clipboard=memory_clipboard)

        await service.copy_last([RxMessage(id=1)])

        assert memory_clipboard.text == ""

    @pytest.mark.asyncio
    async def test_clipboard_failure_is_swallowed(self):
        clipboard = FailingClipboard()
        service = ExportService(clipboard=clipboard)

        copied = await service.copy_last([RxMessage(id=1, message="x")])

        assert copied is True
        assert clipboard.attempts == 1

    @pytest.mark.asyncio
    async def test_copy_is_tracked(self, memory_clipboard, tracker, trace_log):
        service = ExportService(clipboard=memory_clipboard, tracker=tracker)

        await service.copy_last([RxMessage(id="abc", message="hey")])

        events = trace_log.get_trace_events(event_types=["message_copied"])
        assert len(events) == 1
        assert events[0].data == {"key": "abc", "length": 3}


class TestExportCsv:
    """Tests for ExportService.export_csv()."""

    @pytest.mark.asyncio
    async def test_empty_list_is_noop(self, memory_clipboard, tracker, trace_log):
        service = ExportService(clipboard=memory_clipboard, tracker=tracker)

        export = await service.export_csv([])

        assert export is None
        assert len(trace_log) == 0

    @pytest.mark.asyncio
    async def test_export_is_tracked(self, memory_clipboard, tracker, trace_log):
        service = ExportService(clipboard=memory_clipboard, tracker=tracker)

        export = await service.export_csv([RxMessage(id=1), RxMessage(id=2)])

        assert export.row_count == 2
        events = trace_log.get_trace_events(event_types=["csv_exported"])
        assert events[0].data["filename"] == export.filename
        assert events[0].data["row_count"] == 2


class TestSystemClipboard:
    """Tests for SystemClipboard."""

    @pytest.mark.asyncio
    async def test_writes_with_platform_command(self):
        clipboard = SystemClipboard()

        with patch("rxconsole.export.clipboard.subprocess.run") as run:
            await clipboard.write_text("hello")

        run.assert_called_once()
        assert run.call_args.kwargs["input"] == b"hello"

    @pytest.mark.asyncio
    async def test_falls_through_missing_commands(self):
        clipboard = SystemClipboard()

        with patch(
            "rxconsole.export.clipboard._copy_commands",
            return_value=[["missing-tool"], ["other-tool"]],
        ), patch(
            "rxconsole.export.clipboard.subprocess.run",
            side_effect=[FileNotFoundError("missing-tool"), None],
        ) as run:
            await clipboard.write_text("x")

        assert run.call_count == 2

    @pytest.mark.asyncio
    async def test_no_command_available(self):
        clipboard = SystemClipboard()

        with patch(
            "rxconsole.export.clipboard._copy_commands",
            return_value=[["missing-tool"]],
        ), patch(
            "rxconsole.export.clipboard.subprocess.run",
            side_effect=FileNotFoundError("missing-tool"),
        ):
            with pytest.raises(ClipboardError):
                await clipboard.write_text("x")

    @pytest.mark.asyncio
    async def test_command_failure(self):
        clipboard = SystemClipboard()

        with patch(
            "rxconsole.export.clipboard.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "xclip"),
        ):
            with pytest.raises(ClipboardError):
                await clipboard.write_text("x")

    @pytest.mark.asyncio
    async def test_failing_command_falls_through_to_next(self):
        """Test that xclip failing without a display still tries wl-copy."""
        clipboard = SystemClipboard()

        with patch(
            "rxconsole.export.clipboard._copy_commands",
            return_value=[["xclip"], ["xsel"], ["wl-copy"]],
        ), patch(
            "rxconsole.export.clipboard.subprocess.run",
            side_effect=[
                subprocess.CalledProcessError(1, "xclip"),
                subprocess.TimeoutExpired("xsel", 2.0),
                None,
            ],
        ) as run:
            await clipboard.write_text("x")

        assert run.call_count == 3
        assert run.call_args.args[0] == ["wl-copy"]

    @pytest.mark.asyncio
    async def test_every_command_failing_raises(self):
        clipboard = SystemClipboard()

        with patch(
            "rxconsole.export.clipboard._copy_commands",
            return_value=[["xclip"], ["wl-copy"]],
        ), patch(
            "rxconsole.export.clipboard.subprocess.run",
            side_effect=[subprocess.CalledProcessError(1, "xclip"), FileNotFoundError("wl-copy")],
        ) as run:
            with pytest.raises(ClipboardError, match="xclip"):
                await clipboard.write_text("x")

        assert run.call_count == 2
