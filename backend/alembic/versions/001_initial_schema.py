"""Initial schema — artworks, artwork_likes, favorites.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "artworks",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("image", sa.Text, nullable=True),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=True),
        sa.Column("medium_tools", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("dimensions", sa.Text, nullable=False, server_default=""),
        sa.Column("price", sa.Float, nullable=False, server_default="0"),
        sa.Column("visibility", sa.Text, nullable=True),
        sa.Column("user_name", sa.Text, nullable=True),
        sa.Column("user_email", sa.Text, nullable=True),
        sa.Column("likes_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_artworks_visibility", "artworks", ["visibility"])
    op.create_index("ix_artworks_user_email", "artworks", ["user_email"])
    op.create_index("ix_artworks_created_at", "artworks", ["created_at"])

    op.create_table(
        "artwork_likes",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "artwork_id", sa.Uuid,
            sa.ForeignKey("artworks.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("artwork_id", "user_id", name="uq_artwork_like"),
    )

    op.create_table(
        "favorites",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("artwork_id", sa.Uuid, nullable=False),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("artwork", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("artwork_id", "user_id", name="uq_favorite_artwork_user"),
    )
    op.create_index("ix_favorites_artwork_id", "favorites", ["artwork_id"])
    op.create_index("ix_favorites_user_id", "favorites", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_favorites_user_id", table_name="favorites")
    op.drop_index("ix_favorites_artwork_id", table_name="favorites")
    op.drop_table("favorites")
    op.drop_table("artwork_likes")
    op.drop_index("ix_artworks_created_at", table_name="artworks")
    op.drop_index("ix_artworks_user_email", table_name="artworks")
    op.drop_index("ix_artworks_visibility", table_name="artworks")
    op.drop_table("artworks")
