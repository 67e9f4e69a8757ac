"""Slug derivation for category names.

A slug is the URL-safe segment the node store uses to build ``path``.
Names that lose information when slugified (non-ASCII text, punctuation)
get a short checksum suffix so visually distinct names rarely collide.
"""

import re
import time
import zlib

from catalog.core.constants import SYNTHETIC_SLUG_PREFIX

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_PLAIN_NAME_RE = re.compile(r"[A-Za-z0-9 -]*")


def _requires_salt(name: str) -> bool:
    """True when name has non-ASCII or characters outside [A-Za-z0-9 -]."""
    return _PLAIN_NAME_RE.fullmatch(name) is None


def _checksum_suffix(name: str) -> str:
    return format(zlib.crc32(name.encode("utf-8")) & 0xFFFF, "04x")


def slugify(name: str) -> str:
    """Convert a category name into a URL-safe slug.

    Lower-cases, collapses runs of characters outside ``[a-z0-9]`` into one
    hyphen and trims hyphens. When the name needs salting a ``-xxxx`` hex
    suffix (low 16 bits of CRC-32 of the trimmed name) is appended. A name
    made only of symbols or whitespace yields ``""``.

    Examples:
        >>> slugify("Algebra 101")
        'algebra-101'
    """
    trimmed = name.strip()
    if not trimmed:
        return ""
    cleaned = _NON_SLUG_RE.sub("-", trimmed.lower()).strip("-")
    if not cleaned:
        # Letters or digits outside ASCII (e.g. CJK) keep a deterministic slug.
        if not any(ch.isalnum() for ch in trimmed):
            return ""
        cleaned = SYNTHETIC_SLUG_PREFIX
    if _requires_salt(trimmed):
        cleaned = f"{cleaned}-{_checksum_suffix(trimmed)}"
    return cleaned


def synthetic_slug() -> str:
    """Time-seeded fallback slug for names that slugify to nothing."""
    return f"{SYNTHETIC_SLUG_PREFIX}-{time.time_ns()}"


def slug_for(name: str) -> str:
    """Slug for create/rename: slugify, falling back to a synthetic slug."""
    return slugify(name) or synthetic_slug()
