"""Public content route."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_delivery_resolver
from app.models.schemas import ErrorResponse
from app.services.delivery import DeliveryResolver

router = APIRouter(tags=["delivery"])


@router.get(
    "/projects/{slug}",
    response_class=Response,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@router.get("/projects/{slug}/", response_class=Response, include_in_schema=False)
async def serve_project(slug: str, resolver: DeliveryResolver = Depends(get_delivery_resolver)):
    """Serve the HTML of an active project byte-for-byte."""
    delivered = await resolver.resolve(slug)
    return Response(
        content=delivered.content,
        media_type=delivered.media_type,
        headers={"Cache-Control": delivered.cache_control},
    )
