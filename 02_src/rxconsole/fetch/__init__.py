"""Fetch client module."""

from .client import FetchClient, FetchError, IFetchClient, parse_messages, parse_stats

__all__ = ["FetchClient", "FetchError", "IFetchClient", "parse_messages", "parse_stats"]
