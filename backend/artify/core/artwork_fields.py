"""Artwork Fields — pure normalization of client payloads into storable field sets.

Invariants:
    - price is always a finite, non-negative float (0.0 when absent or unparseable)
    - dimensions is always a string ("" when absent)
    - Update payloads replace every editable field; missing fields become None
    - Legacy aliases: medium -> mediumTools, imageUrl -> image (update only)
    - Creator fields (userName, userEmail) are set on create and never updated

Design Decisions:
    - Leading-number price parsing: "12abc" -> 12.0, matching what web clients
      historically submitted from free-text inputs
    - Returns snake_case column dicts: the store layer never sees client key names
"""

import math
import re
from datetime import datetime
from typing import Any

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_EDITABLE_FIELDS = (
    ("image", "image"),
    ("title", "title"),
    ("category", "category"),
    ("mediumTools", "medium_tools"),
    ("description", "description"),
    ("visibility", "visibility"),
)


def parse_price(value: Any) -> float:
    """Coerce a client price into a non-negative float."""
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(0))
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def build_new_artwork(payload: dict, now: datetime) -> dict:
    """Build the column set for a newly created artwork."""
    fields = {
        column: _text_or_none(payload.get(key))
        for key, column in _EDITABLE_FIELDS
    }
    fields.update(
        dimensions=_text_or_none(payload.get("dimensions")) or "",
        price=parse_price(payload.get("price")),
        user_name=_text_or_none(payload.get("userName")),
        user_email=_text_or_none(payload.get("userEmail")),
        likes_count=0,
        created_at=now,
    )
    return fields


def build_artwork_update(payload: dict, now: datetime) -> dict:
    """Build the full replacement column set for an artwork update."""
    resolved = dict(payload)
    if not resolved.get("mediumTools"):
        resolved["mediumTools"] = payload.get("medium")
    if not resolved.get("image"):
        resolved["image"] = payload.get("imageUrl")
    fields = {
        column: _text_or_none(resolved.get(key))
        for key, column in _EDITABLE_FIELDS
    }
    fields.update(
        dimensions=_text_or_none(payload.get("dimensions")) or "",
        price=parse_price(payload.get("price")),
        updated_at=now,
    )
    return fields
