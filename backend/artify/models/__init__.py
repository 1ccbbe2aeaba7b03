"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Artwork is the aggregate root for likes; favorites reference artworks weakly

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from artify.models.artwork import Artwork  # noqa: F401
from artify.models.artwork_like import ArtworkLike  # noqa: F401
from artify.models.favorite import Favorite  # noqa: F401
