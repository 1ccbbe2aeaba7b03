"""User Routes — per-creator aggregates."""

from fastapi import APIRouter, Depends

from artify.api.dependencies import get_artwork_service
from artify.services.artwork_service import ArtworkService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_email}/artworks/count")
async def count_user_artworks(
    user_email: str, service: ArtworkService = Depends(get_artwork_service),
):
    return {"success": True, "count": await service.count_by_user(user_email)}
