"""Stream read API routes."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from ...app import IApplication
from ...config import LIMIT_OPTIONS
from ...metrics import DerivedMetrics


class MessageResponse(BaseModel):
    """One row of the message list."""

    key: str
    id: Any = None
    timestamp: Any = None
    device: Any = None
    msg_id: Any = None
    message: Any = None


class MetricsResponse(BaseModel):
    """Derived figures for the current snapshot."""

    rate_per_min: int
    received_today: int | float
    total_received: int | float
    message_count: int
    last_message_preview: str
    version: int


class StreamResponse(BaseModel):
    """Everything a renderer needs for one frame."""

    mode: str
    limit: int
    limit_options: list[int]
    version: int
    fetched_at: datetime | None
    messages: list[MessageResponse]
    stats: dict[str, Any]
    metrics: MetricsResponse


def metrics_response(metrics: DerivedMetrics) -> MetricsResponse:
    return MetricsResponse(
        rate_per_min=metrics.rate_per_min,
        received_today=metrics.received_today,
        total_received=metrics.total_received,
        message_count=metrics.message_count,
        last_message_preview=metrics.last_message_preview,
        version=metrics.version,
    )


def create_stream_router(app: IApplication) -> APIRouter:
    """Create stream router."""
    router = APIRouter(prefix="/api", tags=["stream"])

    @router.get("/stream", response_model=StreamResponse)
    async def get_stream() -> StreamResponse:
        """Current snapshot with derived metrics, computed at request time."""
        snapshot = app.stream_state.snapshot
        scheduler = app.scheduler
        return StreamResponse(
            mode=scheduler.mode.value,
            limit=scheduler.params.limit,
            limit_options=list(LIMIT_OPTIONS),
            version=snapshot.version,
            fetched_at=snapshot.fetched_at,
            messages=[
                MessageResponse(
                    key=m.key,
                    id=m.id,
                    timestamp=m.timestamp,
                    device=m.device,
                    msg_id=m.msg_id,
                    message=m.message,
                )
                for m in snapshot.messages
            ],
            stats=snapshot.stats.to_dict(),
            metrics=metrics_response(app.metrics.derive(snapshot)),
        )

    @router.get("/metrics", response_model=MetricsResponse)
    async def get_metrics() -> MetricsResponse:
        """Derived metrics only."""
        return metrics_response(app.metrics.derive())

    return router
