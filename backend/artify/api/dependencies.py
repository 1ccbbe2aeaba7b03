"""API Dependencies — wires request-scoped services onto the shared session pool.

Invariants:
    - One SqlArtStore per request, bound to that request's AsyncSession
    - Services receive the store handle; routes never touch the session

Design Decisions:
    - Overriding get_art_store swaps the whole persistence layer in tests
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from artify.config import get_settings
from artify.core.repository_protocols import ArtStore
from artify.infrastructure.database import get_db
from artify.services.art_store import SqlArtStore
from artify.services.artwork_service import ArtworkService
from artify.services.favorite_service import FavoriteService


async def get_art_store(db: AsyncSession = Depends(get_db)) -> ArtStore:
    return SqlArtStore(db)


async def get_artwork_service(
    store: ArtStore = Depends(get_art_store),
) -> ArtworkService:
    settings = get_settings()
    return ArtworkService(
        store,
        default_visibility=settings.default_visibility,
        featured_limit=settings.featured_limit,
    )


async def get_favorite_service(
    store: ArtStore = Depends(get_art_store),
) -> FavoriteService:
    return FavoriteService(store)
