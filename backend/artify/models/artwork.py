"""Artwork ORM — persists individual art pieces and their like counter.

Invariants:
    - id is UUID primary key (generated on insert)
    - likes_count == number of ArtworkLike rows for the artwork
    - dimensions defaults to "" and price to 0.0
    - updated_at is None until the first update

Design Decisions:
    - likes_count denormalized: listing never counts like rows (ADR: read performance)
    - likes loaded with selectin, ordered by created_at so likedBy keeps like order
    - No ORM cascade to favorites: favorites hold a weak reference, the service
      deletes them explicitly in the same transaction
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, Float, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from artify.db.base import Base


class Artwork(Base):
    """Artwork entity: one art piece shared by a creator."""
    __tablename__ = "artworks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)
    medium_tools: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    dimensions: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    visibility: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    user_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_email: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    likes_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    likes: Mapped[list["ArtworkLike"]] = relationship(
        "ArtworkLike", back_populates="artwork",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="ArtworkLike.created_at",
    )

    @property
    def liked_by(self) -> list[str]:
        return [like.user_id for like in self.likes]
