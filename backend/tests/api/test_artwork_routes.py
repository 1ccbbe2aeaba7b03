"""Artwork Routes — listing, detail, create, update and delete over HTTP.

Tests cover:
    - Create returns {success, message, id}; stored record has server-owned fields
    - Price coercion end to end; numeric and long values accepted for text fields
    - Visibility filter default, featured cap and ordering, per-user listing
    - Update aliases, 404 and 400 paths
    - Delete removes the record and its favorites
"""

from datetime import datetime, timedelta, timezone

MISSING_ID = "0b3c6a9e-2f52-4a4e-9a43-0f5f4d8f6a11"


async def test_create_returns_generated_id(client):
    res = await client.post("/api/artworks", json={
        "title": "Sunset", "category": "Painting",
        "userEmail": "a@x.com", "visibility": "Public",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Artwork added successfully"

    detail = await client.get(f"/api/artworks/{body['id']}")
    assert detail.status_code == 200
    artwork = detail.json()["data"]
    assert artwork["_id"] == body["id"]
    assert artwork["title"] == "Sunset"
    assert artwork["likesCount"] == 0
    assert artwork["likedBy"] == []
    assert artwork["createdAt"] is not None


async def test_create_parses_string_price(client, create_via_api):
    artwork_id = await create_via_api(price="12.50")
    res = await client.get(f"/api/artworks/{artwork_id}")
    assert res.json()["data"]["price"] == 12.5


async def test_create_without_price_stores_zero(client, create_via_api):
    artwork_id = await create_via_api()
    artwork = (await client.get(f"/api/artworks/{artwork_id}")).json()["data"]
    assert artwork["price"] == 0
    assert artwork["dimensions"] == ""


async def test_create_ignores_client_supplied_counters(client, create_via_api):
    artwork_id = await create_via_api(likesCount=50, likedBy=["x"])
    artwork = (await client.get(f"/api/artworks/{artwork_id}")).json()["data"]
    assert artwork["likesCount"] == 0
    assert artwork["likedBy"] == []


async def test_create_accepts_numeric_text_fields(client):
    res = await client.post("/api/artworks", json={
        "title": 1999, "dimensions": 30, "userEmail": "a@x.com",
    })
    assert res.status_code == 200, res.text
    artwork = (await client.get(f"/api/artworks/{res.json()['id']}")).json()["data"]
    assert artwork["title"] == "1999"
    assert artwork["dimensions"] == "30"


async def test_update_accepts_numeric_text_fields(client, create_via_api):
    artwork_id = await create_via_api()
    res = await client.put(f"/api/artworks/{artwork_id}", json={
        "title": "Sunset", "dimensions": 40.5,
    })
    assert res.status_code == 200, res.text
    artwork = (await client.get(f"/api/artworks/{artwork_id}")).json()["data"]
    assert artwork["dimensions"] == "40.5"


async def test_create_stores_long_free_text(client, create_via_api):
    title = "t" * 2000
    artwork_id = await create_via_api(title=title, visibility="Members only " * 10)
    artwork = (await client.get(f"/api/artworks/{artwork_id}")).json()["data"]
    assert artwork["title"] == title


async def test_get_malformed_id_returns_400(client):
    res = await client.get("/api/artworks/not-an-id")
    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "error": "Invalid id format: 'not-an-id'",
        "code": "INVALID_ARGUMENT",
    }


async def test_get_missing_artwork_returns_404(client):
    res = await client.get(f"/api/artworks/{MISSING_ID}")
    assert res.status_code == 404
    assert res.json()["success"] is False
    assert res.json()["error"] == "Artwork not found"


async def test_list_defaults_to_public(client, seed_artwork):
    await seed_artwork(title="Open")
    await seed_artwork(title="Hidden", visibility="Private")

    res = await client.get("/api/artworks")

    assert res.status_code == 200
    assert [a["title"] for a in res.json()["data"]] == ["Open"]


async def test_list_filters_by_visibility_param(client, seed_artwork):
    await seed_artwork(title="Open")
    await seed_artwork(title="Hidden", visibility="Private")

    res = await client.get("/api/artworks", params={"visibility": "Private"})

    assert [a["title"] for a in res.json()["data"]] == ["Hidden"]


async def test_featured_returns_six_newest_first(client, seed_artwork):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for i in range(8):
        await seed_artwork(title=f"Piece {i}", created_at=base + timedelta(minutes=i))

    res = await client.get("/api/artworks/featured")

    assert res.status_code == 200
    titles = [a["title"] for a in res.json()["data"]]
    assert titles == [f"Piece {i}" for i in range(7, 1, -1)]


async def test_featured_is_not_shadowed_by_detail_route(client):
    res = await client.get("/api/artworks/featured")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": []}


async def test_user_listing_is_newest_first(client, seed_artwork):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    await seed_artwork(title="Old", user_email="b@x.com", created_at=base)
    await seed_artwork(title="New", user_email="b@x.com", created_at=base + timedelta(days=1))
    await seed_artwork(title="Other", user_email="c@x.com")

    res = await client.get("/api/artworks/user/b@x.com")

    assert [a["title"] for a in res.json()["data"]] == ["New", "Old"]


async def test_update_replaces_fields(client, create_via_api):
    artwork_id = await create_via_api(description="Warm", price=40)

    res = await client.put(f"/api/artworks/{artwork_id}", json={
        "title": "Dusk", "medium": "Oil", "imageUrl": "http://img/dusk.png",
        "visibility": "Private", "price": "55",
    })

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Artwork updated successfully"}
    artwork = (await client.get(f"/api/artworks/{artwork_id}")).json()["data"]
    assert artwork["title"] == "Dusk"
    assert artwork["mediumTools"] == "Oil"
    assert artwork["image"] == "http://img/dusk.png"
    assert artwork["price"] == 55
    assert artwork["description"] is None
    assert artwork["userEmail"] == "a@x.com"
    assert artwork["updatedAt"] is not None


async def test_update_with_unchanged_values_succeeds(client, create_via_api):
    artwork_id = await create_via_api()
    body = {"title": "Same", "visibility": "Public"}
    await client.put(f"/api/artworks/{artwork_id}", json=body)
    res = await client.put(f"/api/artworks/{artwork_id}", json=body)
    assert res.status_code == 200


async def test_update_missing_artwork_returns_404(client):
    res = await client.put(f"/api/artworks/{MISSING_ID}", json={"title": "x"})
    assert res.status_code == 404


async def test_update_malformed_id_returns_400(client):
    res = await client.put("/api/artworks/not-an-id", json={"title": "x"})
    assert res.status_code == 400


async def test_delete_removes_artwork_and_favorites(client, create_via_api):
    artwork_id = await create_via_api()
    await client.post(f"/api/favorites/{artwork_id}", json={"userId": "u1"})

    res = await client.delete(f"/api/artworks/{artwork_id}")

    assert res.status_code == 200
    assert res.json()["message"] == "Artwork deleted successfully"
    assert (await client.get(f"/api/artworks/{artwork_id}")).status_code == 404
    status = await client.get(f"/api/favorites/{artwork_id}/u1")
    assert status.json() == {"success": True, "isFavorited": False}
    favorites = await client.get("/api/favorites/user/u1")
    assert favorites.json()["data"] == []


async def test_delete_twice_returns_404(client, create_via_api):
    artwork_id = await create_via_api()
    await client.delete(f"/api/artworks/{artwork_id}")
    res = await client.delete(f"/api/artworks/{artwork_id}")
    assert res.status_code == 404


async def test_delete_malformed_id_returns_400(client):
    res = await client.delete("/api/artworks/not-an-id")
    assert res.status_code == 400
