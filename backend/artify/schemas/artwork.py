"""Artwork Schemas — Pydantic request bodies for artwork and toggle endpoints.

Invariants:
    - ArtworkPayload accepts every client field as optional; normalization happens in
      core/artwork_fields.py, not here
    - ToggleRequest.userId is required and non-blank

Design Decisions:
    - price typed as Any: clients send numbers, numeric strings and free text alike,
      and the leading-number rule must see the raw value
    - Text fields accept numbers too (a bare 30 for dimensions is a valid value)
    - Unknown keys ignored so older clients sending extra fields keep working
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Text fields are stored as given; numbers are stringified in core/artwork_fields.py
FreeText = str | int | float | None


class ArtworkPayload(BaseModel):
    """Create/update body. Legacy aliases medium and imageUrl honored on update."""
    model_config = ConfigDict(extra="ignore")

    image: FreeText = None
    imageUrl: FreeText = None
    title: FreeText = None
    category: FreeText = None
    mediumTools: FreeText = None
    medium: FreeText = None
    description: FreeText = None
    dimensions: FreeText = None
    price: Any = None
    visibility: FreeText = None
    userName: FreeText = None
    userEmail: FreeText = None


class ToggleRequest(BaseModel):
    """Like/favorite toggle body."""
    userId: str = Field(min_length=1, max_length=320)

    @field_validator("userId")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("userId cannot be empty or whitespace")
        return v
