"""Small string normalization helpers."""

import re

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase, collapse non-alphanumerics to '-' and trim leading/trailing dashes."""
    return _NON_SLUG.sub("-", (value or "").lower()).strip("-")


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated query value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
