"""Artwork Service — queries, mutations and the like toggle over an injected ArtStore.

Invariants:
    - Ids are parsed before any store call (malformed id -> InvalidIdentifierError)
    - Every mutation ends with exactly one commit; nothing is retried
    - likes_count changes only together with a like row insert/delete, in one transaction
    - Delete removes the artwork, its likes and every favorite referencing it atomically

Design Decisions:
    - Like toggle is delete-first: a successful conditional delete means the user had
      liked the artwork, otherwise the like is inserted. The decision and the write are
      one statement, so concurrent toggles by the same user cannot double-count
    - Store injected, not imported: tests substitute an in-memory fake
"""

import logging
from datetime import datetime, timezone

from artify.core.artwork_fields import build_artwork_update, build_new_artwork
from artify.core.domain_types import (
    ArtworkId, LikeState, UserKey, Visibility, parse_artwork_id,
)
from artify.core.errors import ErrorContext, ResourceNotFoundError
from artify.core.repository_protocols import ArtStore

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _not_found(artwork_id: ArtworkId) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Artwork", str(artwork_id), ErrorContext(artwork_id=str(artwork_id)),
    )


class ArtworkService:
    """Artwork operations backed by an ArtStore."""

    def __init__(
        self,
        store: ArtStore,
        default_visibility: str = Visibility.PUBLIC.value,
        featured_limit: int = 6,
    ):
        self._store = store
        self._default_visibility = default_visibility
        self._featured_limit = featured_limit

    # ─── Queries ─────────────────────────────────────────────────

    async def list_all(self) -> list[dict]:
        artworks = await self._store.list_artworks()
        logger.info("Artworks fetched", extra={"count": len(artworks)})
        return artworks

    async def list_by_visibility(self, visibility: str | None = None) -> list[dict]:
        return await self._store.list_artworks(
            visibility=visibility or self._default_visibility,
        )

    async def list_featured(self) -> list[dict]:
        artworks = await self._store.list_artworks(
            newest_first=True, limit=self._featured_limit,
        )
        logger.info("Featured artworks fetched", extra={"count": len(artworks)})
        return artworks

    async def list_by_user(self, user_email: str) -> list[dict]:
        return await self._store.list_artworks(
            user_email=user_email, newest_first=True,
        )

    async def get(self, raw_id: str) -> dict:
        artwork_id = parse_artwork_id(raw_id)
        artwork = await self._store.get_artwork(artwork_id)
        if artwork is None:
            raise _not_found(artwork_id)
        return artwork

    async def count_by_user(self, user_email: str) -> int:
        return await self._store.count_artworks(user_email)

    # ─── Mutations ───────────────────────────────────────────────

    async def create(self, payload: dict) -> ArtworkId:
        fields = build_new_artwork(payload, _now())
        artwork_id = await self._store.insert_artwork(fields)
        await self._store.commit()
        logger.info(
            "Artwork created",
            extra={"artwork_id": str(artwork_id), "user_id": fields["user_email"]},
        )
        return artwork_id

    async def update(self, raw_id: str, payload: dict) -> None:
        artwork_id = parse_artwork_id(raw_id)
        fields = build_artwork_update(payload, _now())
        matched = await self._store.update_artwork(artwork_id, fields)
        if not matched:
            await self._store.rollback()
            raise _not_found(artwork_id)
        await self._store.commit()
        logger.info("Artwork updated", extra={"artwork_id": str(artwork_id)})

    async def delete(self, raw_id: str) -> int:
        """Delete an artwork and its favorites. Returns the number of favorites removed."""
        artwork_id = parse_artwork_id(raw_id)
        deleted = await self._store.delete_artwork(artwork_id)
        if not deleted:
            await self._store.rollback()
            raise _not_found(artwork_id)
        removed = await self._store.delete_favorites_for_artwork(artwork_id)
        await self._store.commit()
        logger.info(
            "Artwork deleted",
            extra={"artwork_id": str(artwork_id), "count": removed},
        )
        return removed

    # ─── Likes ───────────────────────────────────────────────────

    async def toggle_like(self, raw_id: str, user_id: UserKey) -> tuple[LikeState, int]:
        """Flip the user's like on an artwork. Returns (new state, likes count)."""
        artwork_id = parse_artwork_id(raw_id)
        if not await self._store.lock_artwork(artwork_id):
            await self._store.rollback()
            raise _not_found(artwork_id)

        if await self._store.remove_like(artwork_id, user_id):
            state, delta = LikeState.NOT_LIKED, -1
        else:
            await self._store.add_like(artwork_id, user_id)
            state, delta = LikeState.LIKED, 1
        likes = await self._store.adjust_likes_count(artwork_id, delta)
        await self._store.commit()

        logger.info(
            f"Like toggled to {state.value}",
            extra={"artwork_id": str(artwork_id), "user_id": user_id},
        )
        return state, likes

    async def is_liked(self, raw_id: str, user_id: UserKey) -> bool:
        artwork_id = parse_artwork_id(raw_id)
        artwork = await self._store.get_artwork(artwork_id)
        if artwork is None:
            raise _not_found(artwork_id)
        return user_id in artwork["likedBy"]
