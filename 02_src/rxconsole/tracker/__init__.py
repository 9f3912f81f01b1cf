"""Tracker module."""

from .trace_log import ITraceLog, TraceLog
from .tracker import ITracker, Tracker

__all__ = ["ITraceLog", "TraceLog", "ITracker", "Tracker"]
