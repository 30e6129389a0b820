"""Route for the visitor analytics function."""

from fastapi import APIRouter, Request, status

from site_functions.schemas.analytics import TrackVisitorRequest, TrackVisitorResponse
from site_functions.services.analytics_service import AnalyticsService

PATH = "/track-visitor"

router = APIRouter(tags=["Analytics"])


@router.post(
    PATH,
    response_model=TrackVisitorResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Event handled; tracked is false if it could not be stored",
            "content": {
                "application/json": {"example": {"status": True, "tracked": True}}
            },
        },
        400: {"description": "page is required"},
    },
)
async def track_visitor(
    request: Request, track_request: TrackVisitorRequest
) -> TrackVisitorResponse:
    """Record a page view or custom event."""
    service = AnalyticsService()
    return await service.track(track_request, request.headers)
