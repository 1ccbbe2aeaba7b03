"""Favorite ORM — a user's bookmark of an artwork, with an embedded snapshot.

Invariants:
    - At most one row per (artwork_id, user_id) (uq_favorite_artwork_user)
    - artwork is the artwork document as it was when favorited; never refreshed
    - Created and deleted only by the favorite toggle, never updated

Design Decisions:
    - artwork_id is a weak reference (no FK): favorites do not keep artworks alive,
      the artwork delete removes them explicitly
    - JSON snapshot column: listing favorites needs no join (ADR: read optimization,
      staleness accepted)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from artify.db.base import Base


class Favorite(Base):
    """Favorite entity: one (artwork, user) bookmark."""
    __tablename__ = "favorites"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    artwork_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(320), nullable=False, index=True,
    )
    artwork: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint(
            "artwork_id", "user_id", name="uq_favorite_artwork_user",
        ),
    )
