"""Favorite Service — toggle, snapshot semantics and listing against the in-memory store.

Tests cover:
    - Toggle parity: two toggles return to not favorited
    - Snapshot is taken at favorite time and not refreshed by later edits
    - Favoriting a missing artwork raises and writes nothing
    - Un-favoriting works even after the artwork is gone
    - The artwork row lock is taken before the favorite is checked
"""

import pytest
from uuid import UUID

from artify.core.domain_types import FavoriteState, UserKey
from artify.core.errors import InvalidIdentifierError, ResourceNotFoundError

MISSING_ID = "0b3c6a9e-2f52-4a4e-9a43-0f5f4d8f6a11"


async def test_toggle_twice_restores_state(favorite_service, create_artwork):
    artwork_id = await create_artwork()
    assert await favorite_service.toggle(artwork_id, UserKey("u1")) == FavoriteState.FAVORITED
    assert await favorite_service.is_favorited(artwork_id, UserKey("u1"))
    assert await favorite_service.toggle(artwork_id, UserKey("u1")) == FavoriteState.NOT_FAVORITED
    assert not await favorite_service.is_favorited(artwork_id, UserKey("u1"))


async def test_favorites_are_per_user(favorite_service, create_artwork):
    artwork_id = await create_artwork()
    await favorite_service.toggle(artwork_id, UserKey("u1"))
    assert not await favorite_service.is_favorited(artwork_id, UserKey("u2"))


async def test_snapshot_is_not_refreshed_by_updates(
    artwork_service, favorite_service, create_artwork,
):
    artwork_id = await create_artwork(title="Original")
    await favorite_service.toggle(artwork_id, UserKey("u1"))
    await artwork_service.update(artwork_id, {"title": "Renamed"})

    favorites = await favorite_service.list_for_user(UserKey("u1"))

    assert [f["title"] for f in favorites] == ["Original"]
    assert favorites[0]["_id"] == artwork_id


async def test_list_is_most_recent_first(favorite_service, create_artwork):
    first = await create_artwork(title="First")
    second = await create_artwork(title="Second")
    await favorite_service.toggle(first, UserKey("u1"))
    await favorite_service.toggle(second, UserKey("u1"))
    titles = [f["title"] for f in await favorite_service.list_for_user(UserKey("u1"))]
    assert titles == ["Second", "First"]


async def test_favoriting_missing_artwork_raises(store, favorite_service):
    with pytest.raises(ResourceNotFoundError):
        await favorite_service.toggle(MISSING_ID, UserKey("u1"))
    assert "add_favorite" not in store.calls
    assert store.commits == 0


async def test_malformed_id_never_reaches_store(store, favorite_service):
    with pytest.raises(InvalidIdentifierError):
        await favorite_service.toggle("not-an-id", UserKey("u1"))
    with pytest.raises(InvalidIdentifierError):
        await favorite_service.is_favorited("not-an-id", UserKey("u1"))
    assert store.calls == []


async def test_unfavorite_after_out_of_band_delete(store, favorite_service, create_artwork):
    artwork_id = await create_artwork()
    await favorite_service.toggle(artwork_id, UserKey("u1"))
    # Artwork removed without the cascade, leaving an orphaned favorite
    await store.delete_artwork(UUID(artwork_id))
    await store.commit()

    state = await favorite_service.toggle(artwork_id, UserKey("u1"))

    assert state == FavoriteState.NOT_FAVORITED


async def test_artwork_is_locked_before_favorite_is_checked(
    store, favorite_service, create_artwork,
):
    artwork_id = await create_artwork()
    store.calls.clear()

    await favorite_service.toggle(artwork_id, UserKey("u1"))
    assert store.calls[:2] == ["lock_artwork", "remove_favorite"]

    store.calls.clear()
    await favorite_service.toggle(artwork_id, UserKey("u1"))
    assert store.calls == ["lock_artwork", "remove_favorite"]
