"""Received-message data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RxMessage:
    """A single received radio-frame message as reported by the backend.

    Field values are kept exactly as decoded from JSON so that exports render
    what the backend sent (an integer msg_id stays an integer).
    """

    id: Any = None
    timestamp: Any = None
    device: Any = None
    msg_id: Any = None
    message: Any = None
    ordinal: int = 0  # position in the fetched batch

    @property
    def key(self) -> str:
        """Stable row identity: the server id, else timestamp plus batch position."""
        if self.id:
            return str(self.id)
        return f"{self.timestamp}-{self.ordinal}"

    @property
    def text(self) -> str:
        """Message payload with a missing value read as an empty string."""
        if self.message is None:
            return ""
        return str(self.message)

    @classmethod
    def from_payload(cls, payload: dict, ordinal: int = 0) -> "RxMessage":
        """Build a message from one decoded JSON object, ignoring unknown fields."""
        return cls(
            id=payload.get("id"),
            timestamp=payload.get("timestamp"),
            device=payload.get("device"),
            msg_id=payload.get("msg_id"),
            message=payload.get("message"),
            ordinal=ordinal,
        )
