"""Text helpers shared by the builder and the definition loader."""

from __future__ import annotations

import re
from typing import Optional


def normalise_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim the string."""

    return re.sub(r"\s+", " ", text).strip()


def is_blank(text: Optional[str]) -> bool:
    """Return ``True`` for ``None``, empty, or whitespace-only strings."""

    return text is None or not text.strip()
