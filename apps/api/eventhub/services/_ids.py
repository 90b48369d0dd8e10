from __future__ import annotations

import uuid
from typing import Any


def parse_id(value: Any) -> uuid.UUID | None:
    """Coerce a path/body id to a UUID; None when it cannot name any row."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None
