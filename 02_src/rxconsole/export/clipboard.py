"""System clipboard access."""

import asyncio
import subprocess
import sys
from typing import Protocol


class ClipboardError(Exception):
    """The clipboard could not be written."""


class IClipboard(Protocol):
    """Best-effort text clipboard."""

    async def write_text(self, text: str) -> None:
        """Write text to the clipboard. Raise ClipboardError on failure."""
        ...


def _copy_commands() -> list[list[str]]:
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if sys.platform == "win32":
        return [["clip"]]
    # Linux: X11 tools first, Wayland last
    return [
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
        ["wl-copy"],
    ]


class SystemClipboard:
    """Clipboard backed by the platform copy command (pbcopy, clip, xclip, xsel)."""

    def __init__(self, timeout: float = 2.0):
        self._timeout = timeout

    async def write_text(self, text: str) -> None:
        await asyncio.to_thread(self._write_sync, text)

    def _write_sync(self, text: str) -> None:
        data = text.encode("utf-8")
        errors: list[str] = []
        for command in _copy_commands():
            try:
                subprocess.run(
                    command,
                    input=data,
                    check=True,
                    timeout=self._timeout,
                    shell=sys.platform == "win32",
                )
                return
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
                # xclip without a display fails; xsel or wl-copy may still work
                errors.append(f"{command[0]}: {e}")
        raise ClipboardError("no clipboard command succeeded: " + "; ".join(errors))


class MemoryClipboard:
    """In-process clipboard for headless runs and tests."""

    def __init__(self):
        self.text: str | None = None
        self.writes = 0

    async def write_text(self, text: str) -> None:
        self.text = text
        self.writes += 1
