"""Stream state module."""

from .stream_state import IStreamState, StreamState

__all__ = ["IStreamState", "StreamState"]
