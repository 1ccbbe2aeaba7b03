"""Favorite Service — favorite toggle, listing and status over an injected ArtStore.

Invariants:
    - At most one favorite per (artwork, user); its existence is the toggle state
    - A new favorite embeds the artwork document as of now; it is never refreshed
    - No favorite is ever created for a missing artwork (ResourceNotFoundError instead)

Design Decisions:
    - The artwork row is locked before anything else, so concurrent toggles by one user
      queue behind each other and the insert never races the unique constraint
    - Delete-first under the lock, same as likes: removing an existing favorite is the check
    - Un-favoriting does not require the artwork to exist, so favorites orphaned by
      an out-of-band delete can still be cleared by their owner
"""

import logging

from artify.core.domain_types import (
    FavoriteState, UserKey, parse_artwork_id,
)
from artify.core.errors import ErrorContext, ResourceNotFoundError
from artify.core.repository_protocols import ArtStore

logger = logging.getLogger(__name__)


class FavoriteService:
    """Favorite operations backed by an ArtStore."""

    def __init__(self, store: ArtStore):
        self._store = store

    async def toggle(self, raw_artwork_id: str, user_id: UserKey) -> FavoriteState:
        artwork_id = parse_artwork_id(raw_artwork_id)
        context = ErrorContext(artwork_id=str(artwork_id), user_id=user_id)

        locked = await self._store.lock_artwork(artwork_id)
        if await self._store.remove_favorite(artwork_id, user_id):
            await self._store.commit()
            logger.info(
                "Favorite removed",
                extra={"artwork_id": str(artwork_id), "user_id": user_id},
            )
            return FavoriteState.NOT_FAVORITED

        snapshot = await self._store.get_artwork(artwork_id) if locked else None
        if snapshot is None:
            await self._store.rollback()
            raise ResourceNotFoundError("Artwork", str(artwork_id), context)
        await self._store.add_favorite(artwork_id, user_id, snapshot)
        await self._store.commit()
        logger.info(
            "Favorite added",
            extra={"artwork_id": str(artwork_id), "user_id": user_id},
        )
        return FavoriteState.FAVORITED

    async def list_for_user(self, user_id: UserKey) -> list[dict]:
        return await self._store.list_favorite_snapshots(user_id)

    async def is_favorited(self, raw_artwork_id: str, user_id: UserKey) -> bool:
        artwork_id = parse_artwork_id(raw_artwork_id)
        return await self._store.has_favorite(artwork_id, user_id)
