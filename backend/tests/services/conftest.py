"""Service test fixtures — in-memory store and services wired onto it.

Invariants:
    - Every test gets a fresh InMemoryArtStore
    - Services are constructed exactly as the API dependencies construct them
"""

import pytest

from artify.services.artwork_service import ArtworkService
from artify.services.favorite_service import FavoriteService
from tests.services.fake_store import InMemoryArtStore


@pytest.fixture
def store():
    return InMemoryArtStore()


@pytest.fixture
def artwork_service(store):
    return ArtworkService(store, default_visibility="Public", featured_limit=6)


@pytest.fixture
def favorite_service(store):
    return FavoriteService(store)


@pytest.fixture
def create_artwork(artwork_service):
    """Create an artwork through the service and return its id as a string."""
    async def _create(**payload):
        body = {
            "title": "Sunset", "category": "Painting",
            "userEmail": "a@x.com", "visibility": "Public",
        }
        body.update(payload)
        return str(await artwork_service.create(body))
    return _create
