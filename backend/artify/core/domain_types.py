"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ArtworkId wraps UUID; never pass a raw path string past the API boundary
    - UserKey is opaque: never validated as an email, compared by exact match only
    - parse_artwork_id runs before any store call

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Visibility: serializes to JSON without custom encoders, but the store
      accepts any caller-supplied string (values are a convention, not a constraint)
"""

from enum import Enum
from typing import NewType
from uuid import UUID

from artify.core.errors import InvalidIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

ArtworkId = NewType("ArtworkId", UUID)
UserKey = NewType("UserKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class Visibility(str, Enum):
    """Conventional visibility values used by the web client."""
    PUBLIC = "Public"
    PRIVATE = "Private"


class LikeState(str, Enum):
    """Like toggle states per (artwork, user)."""
    LIKED = "liked"
    NOT_LIKED = "not_liked"


class FavoriteState(str, Enum):
    """Favorite toggle states per (artwork, user)."""
    FAVORITED = "favorited"
    NOT_FAVORITED = "not_favorited"


# ─── Parsing ─────────────────────────────────────────────────────

def parse_artwork_id(raw: str) -> ArtworkId:
    """Parse a path segment into an ArtworkId or raise InvalidIdentifierError."""
    try:
        return ArtworkId(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(str(raw))
