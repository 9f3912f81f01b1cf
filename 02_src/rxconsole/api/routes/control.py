"""Sync control API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...app import IApplication


class LimitRequest(BaseModel):
    """Request model for changing the message limit."""

    limit: int


class ControlResponse(BaseModel):
    """Scheduler state after a control action."""

    status: str
    mode: str
    limit: int
    version: int


def create_control_router(app: IApplication) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    def _state(status: str = "ok") -> ControlResponse:
        scheduler = app.scheduler
        return ControlResponse(
            status=status,
            mode=scheduler.mode.value,
            limit=scheduler.params.limit,
            version=app.stream_state.version,
        )

    @router.post("/live", response_model=ControlResponse)
    async def enable_live() -> ControlResponse:
        """Resume the live stream."""
        await app.scheduler.enable()
        return _state()

    @router.post("/pause", response_model=ControlResponse)
    async def pause_live() -> ControlResponse:
        """Pause the live stream; the last snapshot stays visible."""
        await app.scheduler.disable()
        return _state()

    @router.post("/refresh", response_model=ControlResponse)
    async def refresh() -> ControlResponse:
        """Run one poll cycle now. A failed cycle keeps the previous snapshot."""
        ok = await app.scheduler.refresh_once()
        return _state("ok" if ok else "stale")

    @router.put("/limit", response_model=ControlResponse)
    async def set_limit(request: LimitRequest) -> ControlResponse:
        """Change the message limit and refetch."""
        try:
            await app.scheduler.set_limit(request.limit)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _state()

    return router
