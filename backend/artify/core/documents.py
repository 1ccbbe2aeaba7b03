"""Artwork Documents — pure serialization of stored artworks into client JSON documents.

Invariants:
    - Documents are JSON-safe (ids and timestamps are strings) so they can be embedded
      verbatim as favorite snapshots
    - Keys use the client's camelCase names; "_id" carries the identifier
    - likesCount is reported from the stored counter, likedBy from the like rows

Design Decisions:
    - Accepts any ArtworkRecord (structural Protocol): core never imports the ORM
"""

from datetime import datetime

from artify.core.repository_protocols import ArtworkRecord


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def artwork_document(artwork: ArtworkRecord, liked_by: list[str]) -> dict:
    """Serialize an artwork record with its current likers."""
    return {
        "_id": str(artwork.id),
        "image": artwork.image,
        "title": artwork.title,
        "category": artwork.category,
        "mediumTools": artwork.medium_tools,
        "description": artwork.description,
        "dimensions": artwork.dimensions or "",
        "price": artwork.price or 0,
        "visibility": artwork.visibility,
        "userName": artwork.user_name,
        "userEmail": artwork.user_email,
        "likesCount": artwork.likes_count or 0,
        "likedBy": list(liked_by),
        "createdAt": _iso(artwork.created_at),
        "updatedAt": _iso(artwork.updated_at),
    }
