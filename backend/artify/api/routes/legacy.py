"""Legacy Routes — pre-envelope endpoints kept for older web clients.

Invariants:
    - GET /arts returns a bare JSON array of every artwork (no envelope, no filter)

Design Decisions:
    - Marked deprecated in the OpenAPI schema; new clients use /api/artworks
"""

from fastapi import APIRouter, Depends

from artify.api.dependencies import get_artwork_service
from artify.services.artwork_service import ArtworkService

router = APIRouter(tags=["legacy"])


@router.get("/arts", deprecated=True)
async def list_all_artworks(
    service: ArtworkService = Depends(get_artwork_service),
):
    """All artworks as a bare array."""
    return await service.list_all()
