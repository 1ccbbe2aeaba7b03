"""ArtworkLike ORM — one row per (artwork, user) like.

Invariants:
    - Always belongs to an Artwork (artwork_id FK, cascade on delete)
    - At most one row per (artwork_id, user_id) (uq_artwork_like)
    - user_id is an opaque user key, never validated

Design Decisions:
    - Rows instead of an array column: the unique constraint makes a double like
      impossible even if two toggles interleave
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from artify.db.base import Base


class ArtworkLike(Base):
    """Like entity: a user currently liking an artwork."""
    __tablename__ = "artwork_likes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    artwork_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("artworks.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[str] = mapped_column(String(320), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    artwork: Mapped["Artwork"] = relationship(
        "Artwork", back_populates="likes",
    )

    __table_args__ = (
        UniqueConstraint("artwork_id", "user_id", name="uq_artwork_like"),
    )
