"""Title → slug normalisation."""

import re
import secrets
import string
from datetime import datetime

from blog.domain.time import utcnow

SLUG_PATTERN = re.compile(r"[a-z0-9-]+")

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

_FALLBACK_PREFIX = "article"
_FALLBACK_ALPHABET = string.ascii_lowercase + string.digits
_FALLBACK_SUFFIX_LENGTH = 6


def normalize_title(title: str) -> str:
    """Reduce a title to ``[a-z0-9-]``; may return an empty string."""
    slug = title.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def fallback_slug(now: datetime | None = None) -> str:
    """Synthetic slug for titles with nothing usable, e.g. ``article-1718000000000-k3x9q2``."""
    now = now or utcnow()
    millis = int(now.timestamp() * 1000)
    suffix = "".join(
        secrets.choice(_FALLBACK_ALPHABET) for _ in range(_FALLBACK_SUFFIX_LENGTH)
    )
    return f"{_FALLBACK_PREFIX}-{millis}-{suffix}"


def slugify_title(title: str, now: datetime | None = None) -> str:
    return normalize_title(title) or fallback_slug(now)


def is_valid_slug(value: str) -> bool:
    return SLUG_PATTERN.fullmatch(value) is not None
