"""Fetch client for the backend messages and stats endpoints."""

import asyncio
from typing import Any, Protocol

import httpx

from ..logging_config import get_logger
from ..models import PollResult, QueryParams, RxMessage, StatsSnapshot

logger = get_logger(__name__)


class FetchError(Exception):
    """One or both reads of a poll cycle failed.

    failures maps the read name ("messages" or "stats") to its exception.
    """

    def __init__(self, failures: dict[str, Exception]):
        self.failures = failures
        details = "; ".join(f"{name}: {exc!r}" for name, exc in failures.items())
        super().__init__(f"poll cycle failed ({details})")

    @property
    def failed_reads(self) -> list[str]:
        return sorted(self.failures)

    @property
    def partial(self) -> bool:
        """True when exactly one of the two reads failed."""
        return len(self.failures) == 1


class IFetchClient(Protocol):
    """Issues the two reads of one poll cycle."""

    async def fetch(self, params: QueryParams) -> PollResult:
        """Read messages and stats concurrently. Raise FetchError if either fails."""
        ...

    async def aclose(self) -> None:
        ...


def parse_messages(data: Any) -> tuple[RxMessage, ...]:
    """Decode the messages body. null reads as an empty list."""
    if data is None:
        return ()
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array of messages, got {type(data).__name__}")

    messages = []
    for ordinal, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"message #{ordinal} is {type(item).__name__}, not an object")
        messages.append(RxMessage.from_payload(item, ordinal=ordinal))
    return tuple(messages)


def parse_stats(data: Any) -> StatsSnapshot:
    """Decode the stats body. null reads as an empty snapshot."""
    if data is None:
        return StatsSnapshot()
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object of stats, got {type(data).__name__}")
    return StatsSnapshot(data)


class FetchClient:
    """httpx-based client for GET /messages/ and GET /stats/."""

    def __init__(
        self,
        api_base: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._api_base = api_base.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def api_base(self) -> str:
        return self._api_base

    async def fetch(self, params: QueryParams) -> PollResult:
        """Read messages and stats concurrently; resolve only when both complete."""
        messages_result, stats_result = await asyncio.gather(
            self._get_json(
                f"{self._api_base}/messages/",
                params={"role": params.role, "limit": params.limit},
            ),
            self._get_json(f"{self._api_base}/stats/"),
            return_exceptions=True,
        )

        failures: dict[str, Exception] = {}
        messages: tuple[RxMessage, ...] = ()
        stats = StatsSnapshot()

        for name, result in (("messages", messages_result), ("stats", stats_result)):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
            if isinstance(result, Exception):
                failures[name] = result
                continue
            try:
                if name == "messages":
                    messages = parse_messages(result)
                else:
                    stats = parse_stats(result)
            except ValueError as e:
                failures[name] = e

        if failures:
            raise FetchError(failures)

        logger.debug(
            "Fetched %d messages (limit=%d) and %d stats fields",
            len(messages),
            params.limit,
            len(stats),
        )
        return PollResult(messages=messages, stats=stats)

    async def _get_json(self, url: str, params: dict | None = None) -> Any:
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
