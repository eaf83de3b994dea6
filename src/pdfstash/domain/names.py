"""Document name sanitization.

Turns whatever the user typed into a filesystem-safe document name that
always carries the canonical ``.pdf`` extension.

INVARIANT: Sanitization never fails. Bad input degrades to a synthesized
default name so user input can never block PDF creation.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

CANONICAL_EXTENSION = ".pdf"
MAX_NAME_LENGTH = 100

# Reserved on at least one common filesystem, plus control characters 0-31.
_RESERVED_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


@dataclass(frozen=True)
class SanitizedName:
    """Outcome of :func:`sanitize_name`.

    Attributes:
        name: The usable document name.
        fallback_used: True when the input collapsed to nothing and the
            name was synthesized from the clock.
    """

    name: str
    fallback_used: bool = False


def has_canonical_extension(name: str) -> bool:
    """Case-insensitive check for the ``.pdf`` suffix."""
    return name.lower().endswith(CANONICAL_EXTENSION)


def split_extension(name: str) -> tuple[str, str]:
    """Split *name* into ``(stem, suffix)`` around the canonical extension.

    The suffix keeps its original casing. Names without the extension get
    the canonical one.

    Examples:
        >>> split_extension("report.PDF")
        ('report', '.PDF')
        >>> split_extension("report")
        ('report', '.pdf')
    """
    if has_canonical_extension(name):
        cut = len(name) - len(CANONICAL_EXTENSION)
        return name[:cut], name[cut:]
    return name, CANONICAL_EXTENSION


def default_name(image_count: int, *, now: datetime | None = None) -> str:
    """Synthesize ``Document-YYYY-MM-DD-HHMMSS-<n>images.pdf``."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d-%H%M%S")
    return f"Document-{stamp}-{image_count}images{CANONICAL_EXTENSION}"


def sanitize_name(
    raw_name: str,
    fallback_image_count: int = 0,
    *,
    max_length: int = MAX_NAME_LENGTH,
    clock: Callable[[], datetime] = datetime.now,
) -> SanitizedName:
    """Sanitize *raw_name* into a document name.

    Reserved and control characters become ``_``, surrounding whitespace
    and dots are trimmed, the extension is enforced exactly once, and the
    stem is cut so the whole name fits in *max_length*. Empty,
    whitespace-only, or extension-only input yields :func:`default_name`.
    """
    candidate = _RESERVED_CHARS.sub("_", raw_name or "").strip().rstrip(". ")
    # Split before trimming leading dots so ".pdf" reads as extension-only.
    stem, suffix = split_extension(candidate)
    stem = _trim_dots(stem)
    if not stem:
        return SanitizedName(default_name(fallback_image_count, now=clock()), fallback_used=True)

    budget = max(1, max_length - len(suffix))
    if len(stem) > budget:
        stem = stem[:budget].rstrip(" .")
    return SanitizedName(f"{stem}{suffix}")


def _trim_dots(stem: str) -> str:
    """Strip whitespace and dots from both ends until neither remains.

    >>> _trim_dots(". . a ")
    'a'
    """
    while True:
        trimmed = stem.strip().strip(".")
        if trimmed == stem:
            return stem
        stem = trimmed


def sanitize(raw_name: str, fallback_image_count: int = 0) -> str:
    """Return only the sanitized name (see :func:`sanitize_name`)."""
    return sanitize_name(raw_name, fallback_image_count).name
