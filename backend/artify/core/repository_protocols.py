"""Boundary Protocols — contracts between core/services and the store.

Invariants:
    - Services NEVER import SQLAlchemy; every IO operation goes through ArtStore
    - All ids crossing this boundary are parsed ArtworkIds
    - Store methods never commit implicitly; the caller decides the transaction boundary

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy, and the in-memory
      fake used by service tests needs no base class
    - One store handle for both collections: the delete cascade and favorite snapshots span
      artworks and favorites and must share a transaction
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from artify.core.domain_types import ArtworkId, UserKey


class ArtworkRecord(Protocol):
    """Structural contract for stored artwork rows passed to the serializer."""
    id: UUID
    image: str | None
    title: str | None
    category: str | None
    medium_tools: str | None
    description: str | None
    dimensions: str | None
    price: float | None
    visibility: str | None
    user_name: str | None
    user_email: str | None
    likes_count: int
    created_at: datetime
    updated_at: datetime | None


class ArtStore(Protocol):
    """Contract for artwork and favorite persistence, implemented by the shell."""

    # Artworks
    async def list_artworks(
        self,
        *,
        visibility: str | None = None,
        user_email: str | None = None,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> list[dict]: ...
    async def get_artwork(self, artwork_id: ArtworkId) -> dict | None: ...
    async def lock_artwork(self, artwork_id: ArtworkId) -> bool: ...
    async def count_artworks(self, user_email: str) -> int: ...
    async def insert_artwork(self, fields: dict) -> ArtworkId: ...
    async def update_artwork(self, artwork_id: ArtworkId, fields: dict) -> bool: ...
    async def delete_artwork(self, artwork_id: ArtworkId) -> bool: ...

    # Likes
    async def add_like(self, artwork_id: ArtworkId, user_id: UserKey) -> None: ...
    async def remove_like(self, artwork_id: ArtworkId, user_id: UserKey) -> bool: ...
    async def adjust_likes_count(self, artwork_id: ArtworkId, delta: int) -> int: ...

    # Favorites
    async def has_favorite(self, artwork_id: ArtworkId, user_id: UserKey) -> bool: ...
    async def add_favorite(
        self, artwork_id: ArtworkId, user_id: UserKey, snapshot: dict,
    ) -> None: ...
    async def remove_favorite(self, artwork_id: ArtworkId, user_id: UserKey) -> bool: ...
    async def list_favorite_snapshots(self, user_id: UserKey) -> list[dict]: ...
    async def delete_favorites_for_artwork(self, artwork_id: ArtworkId) -> int: ...

    # Transaction
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
