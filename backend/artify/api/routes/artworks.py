"""Artwork Routes — listing, detail, CRUD, and the like toggle.

Invariants:
    - /featured and /user/{user_id} registered before /{artwork_id}
    - Ids arrive as raw strings; services parse them (malformed -> 400, never 422)
    - Every response is a {success: true, ...} envelope

Design Decisions:
    - Body parsed with exclude_unset: update replaces fields, but only the service
      decides what a missing field becomes
"""

import logging

from fastapi import APIRouter, Depends, Query

from artify.api.dependencies import get_artwork_service
from artify.core.domain_types import LikeState, UserKey
from artify.schemas.artwork import ArtworkPayload, ToggleRequest
from artify.services.artwork_service import ArtworkService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/artworks", tags=["artworks"])


@router.get("")
async def list_artworks(
    visibility: str | None = Query(None),
    service: ArtworkService = Depends(get_artwork_service),
):
    """List artworks with an exact visibility match (default Public)."""
    return {"success": True, "data": await service.list_by_visibility(visibility)}


@router.get("/featured")
async def list_featured_artworks(
    service: ArtworkService = Depends(get_artwork_service),
):
    """Most recent artworks, newest first."""
    return {"success": True, "data": await service.list_featured()}


@router.get("/user/{user_id}")
async def list_user_artworks(
    user_id: str, service: ArtworkService = Depends(get_artwork_service),
):
    return {"success": True, "data": await service.list_by_user(user_id)}


@router.get("/{artwork_id}")
async def get_artwork(
    artwork_id: str, service: ArtworkService = Depends(get_artwork_service),
):
    return {"success": True, "data": await service.get(artwork_id)}


@router.post("")
async def create_artwork(
    body: ArtworkPayload,
    service: ArtworkService = Depends(get_artwork_service),
):
    """Create an artwork. Server sets likesCount, likedBy and createdAt."""
    artwork_id = await service.create(body.model_dump(exclude_unset=True))
    return {
        "success": True,
        "message": "Artwork added successfully",
        "id": str(artwork_id),
    }


@router.put("/{artwork_id}")
async def update_artwork(
    artwork_id: str,
    body: ArtworkPayload,
    service: ArtworkService = Depends(get_artwork_service),
):
    await service.update(artwork_id, body.model_dump(exclude_unset=True))
    return {"success": True, "message": "Artwork updated successfully"}


@router.delete("/{artwork_id}")
async def delete_artwork(
    artwork_id: str, service: ArtworkService = Depends(get_artwork_service),
):
    """Delete an artwork together with its likes and favorites."""
    await service.delete(artwork_id)
    return {"success": True, "message": "Artwork deleted successfully"}


@router.post("/{artwork_id}/like")
async def toggle_like(
    artwork_id: str,
    body: ToggleRequest,
    service: ArtworkService = Depends(get_artwork_service),
):
    """Flip the caller's like and report the new state and count."""
    state, likes = await service.toggle_like(artwork_id, UserKey(body.userId))
    return {
        "success": True,
        "isLiked": state == LikeState.LIKED,
        "likes": likes,
    }


@router.get("/{artwork_id}/liked/{user_id}")
async def get_like_status(
    artwork_id: str,
    user_id: str,
    service: ArtworkService = Depends(get_artwork_service),
):
    is_liked = await service.is_liked(artwork_id, UserKey(user_id))
    return {"success": True, "isLiked": is_liked}
