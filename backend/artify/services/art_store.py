"""SQL Art Store — ArtStore implementation over an AsyncSession.

Invariants:
    - Never commits on its own; ArtworkService/FavoriteService own the transaction
    - Counter updates happen in the database (likes_count + delta), never read-modify-write
    - Every artwork leaves this module as a JSON-safe document (core/documents.py)
    - A rejected artwork insert (constraint or value the column cannot hold) raises
      ArtworkRejectedError after rolling back

Design Decisions:
    - Conditional deletes report success through rowcount: the delete IS the membership
      check, so a toggle's decision and its write are the same statement
    - lock_artwork uses SELECT ... FOR UPDATE: serializes toggles on one artwork in
      PostgreSQL; SQLite ignores it and serializes writers on the database lock instead
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from artify.core.documents import artwork_document
from artify.core.domain_types import ArtworkId, UserKey
from artify.core.errors import ArtworkRejectedError, ErrorContext
from artify.models.artwork import Artwork
from artify.models.artwork_like import ArtworkLike
from artify.models.favorite import Favorite

logger = logging.getLogger(__name__)


class SqlArtStore:
    """Store handle bound to one request's database session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    # ─── Artworks ────────────────────────────────────────────────

    async def list_artworks(
        self,
        *,
        visibility: str | None = None,
        user_email: str | None = None,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> list[dict]:
        query = select(Artwork)
        if visibility is not None:
            query = query.where(Artwork.visibility == visibility)
        if user_email is not None:
            query = query.where(Artwork.user_email == user_email)
        if newest_first:
            query = query.order_by(Artwork.created_at.desc())
        if limit is not None:
            query = query.limit(limit)
        result = await self._db.execute(query)
        return [
            artwork_document(artwork, artwork.liked_by)
            for artwork in result.scalars().all()
        ]

    async def get_artwork(self, artwork_id: ArtworkId) -> dict | None:
        result = await self._db.execute(
            select(Artwork).where(Artwork.id == artwork_id),
        )
        artwork = result.scalar_one_or_none()
        if artwork is None:
            return None
        return artwork_document(artwork, artwork.liked_by)

    async def lock_artwork(self, artwork_id: ArtworkId) -> bool:
        result = await self._db.execute(
            select(Artwork.id)
            .where(Artwork.id == artwork_id)
            .with_for_update(),
        )
        return result.scalar_one_or_none() is not None

    async def count_artworks(self, user_email: str) -> int:
        result = await self._db.execute(
            select(func.count())
            .select_from(Artwork)
            .where(Artwork.user_email == user_email),
        )
        return result.scalar_one()

    async def insert_artwork(self, fields: dict) -> ArtworkId:
        artwork = Artwork(**fields)
        self._db.add(artwork)
        try:
            await self._db.flush()
        except (IntegrityError, DataError) as e:
            await self._db.rollback()
            logger.warning(f"Artwork insert rejected: {e}")
            raise ArtworkRejectedError(
                str(e.orig), ErrorContext(user_id=fields.get("user_email")),
            )
        return ArtworkId(artwork.id)

    async def update_artwork(self, artwork_id: ArtworkId, fields: dict) -> bool:
        result = await self._db.execute(
            update(Artwork).where(Artwork.id == artwork_id).values(**fields),
        )
        return result.rowcount > 0

    async def delete_artwork(self, artwork_id: ArtworkId) -> bool:
        await self._db.execute(
            delete(ArtworkLike).where(ArtworkLike.artwork_id == artwork_id),
        )
        result = await self._db.execute(
            delete(Artwork).where(Artwork.id == artwork_id),
        )
        return result.rowcount > 0

    # ─── Likes ───────────────────────────────────────────────────

    async def add_like(self, artwork_id: ArtworkId, user_id: UserKey) -> None:
        self._db.add(ArtworkLike(artwork_id=artwork_id, user_id=user_id))
        await self._db.flush()

    async def remove_like(self, artwork_id: ArtworkId, user_id: UserKey) -> bool:
        result = await self._db.execute(
            delete(ArtworkLike).where(
                ArtworkLike.artwork_id == artwork_id,
                ArtworkLike.user_id == user_id,
            ),
        )
        return result.rowcount > 0

    async def adjust_likes_count(self, artwork_id: ArtworkId, delta: int) -> int:
        await self._db.execute(
            update(Artwork)
            .where(Artwork.id == artwork_id)
            .values(likes_count=Artwork.likes_count + delta),
        )
        result = await self._db.execute(
            select(Artwork.likes_count).where(Artwork.id == artwork_id),
        )
        return result.scalar_one()

    # ─── Favorites ───────────────────────────────────────────────

    async def has_favorite(self, artwork_id: ArtworkId, user_id: UserKey) -> bool:
        result = await self._db.execute(
            select(Favorite.id).where(
                Favorite.artwork_id == artwork_id,
                Favorite.user_id == user_id,
            ),
        )
        return result.scalar_one_or_none() is not None

    async def add_favorite(
        self, artwork_id: ArtworkId, user_id: UserKey, snapshot: dict,
    ) -> None:
        self._db.add(Favorite(
            artwork_id=artwork_id, user_id=user_id, artwork=snapshot,
        ))
        await self._db.flush()

    async def remove_favorite(self, artwork_id: ArtworkId, user_id: UserKey) -> bool:
        result = await self._db.execute(
            delete(Favorite).where(
                Favorite.artwork_id == artwork_id,
                Favorite.user_id == user_id,
            ),
        )
        return result.rowcount > 0

    async def list_favorite_snapshots(self, user_id: UserKey) -> list[dict]:
        result = await self._db.execute(
            select(Favorite.artwork)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc()),
        )
        return list(result.scalars().all())

    async def delete_favorites_for_artwork(self, artwork_id: ArtworkId) -> int:
        result = await self._db.execute(
            delete(Favorite).where(Favorite.artwork_id == artwork_id),
        )
        return result.rowcount

    # ─── Transaction ─────────────────────────────────────────────

    async def commit(self) -> None:
        await self._db.commit()

    async def rollback(self) -> None:
        await self._db.rollback()
