"""Favorite Routes — toggle, per-user listing, and status.

Invariants:
    - /user/{user_id} registered before /{artwork_id}/{user_id} (both are two segments)
    - Listing returns the embedded snapshots, never live artwork rows
"""

import logging

from fastapi import APIRouter, Depends

from artify.api.dependencies import get_favorite_service
from artify.core.domain_types import FavoriteState, UserKey
from artify.schemas.artwork import ToggleRequest
from artify.services.favorite_service import FavoriteService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.post("/{artwork_id}")
async def toggle_favorite(
    artwork_id: str,
    body: ToggleRequest,
    service: FavoriteService = Depends(get_favorite_service),
):
    """Add or remove the artwork from the caller's favorites."""
    state = await service.toggle(artwork_id, UserKey(body.userId))
    return {"success": True, "isFavorited": state == FavoriteState.FAVORITED}


@router.get("/user/{user_id}")
async def list_user_favorites(
    user_id: str, service: FavoriteService = Depends(get_favorite_service),
):
    """Favorited artwork snapshots, most recently favorited first."""
    return {"success": True, "data": await service.list_for_user(UserKey(user_id))}


@router.get("/{artwork_id}/{user_id}")
async def get_favorite_status(
    artwork_id: str,
    user_id: str,
    service: FavoriteService = Depends(get_favorite_service),
):
    is_favorited = await service.is_favorited(artwork_id, UserKey(user_id))
    return {"success": True, "isFavorited": is_favorited}
