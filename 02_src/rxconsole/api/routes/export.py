"""Export and clipboard API routes."""

from fastapi import APIRouter, Response
from pydantic import BaseModel

from ...app import IApplication


class CopyResponse(BaseModel):
    """Response model for copy-last."""

    status: str  # "copied" or "empty"


def create_export_router(app: IApplication) -> APIRouter:
    """Create export router."""
    router = APIRouter(prefix="/api", tags=["export"])

    @router.get("/export.csv")
    async def export_csv() -> Response:
        """Download the current message list as CSV (204 when empty)."""
        export = await app.export_service.export_csv(app.stream_state.messages)
        if export is None:
            return Response(status_code=204)
        return Response(
            content=export.encode(),
            media_type=export.media_type,
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )

    @router.post("/clipboard/last", response_model=CopyResponse)
    async def copy_last() -> dict:
        """Copy the newest message text to the clipboard."""
        copied = await app.export_service.copy_last(app.stream_state.messages)
        return {"status": "copied" if copied else "empty"}

    return router
