"""Collision resolution for document names in the managed directory.

INVARIANT: A resolved name never names an existing file at the moment
of the check. This is advisory (check-then-create), not a lock: the copy
that follows is the only serialization point, and the last writer wins.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from pdfstash.domain.names import MAX_NAME_LENGTH, split_extension
from pdfstash.infrastructure.errors import CollisionUnresolved

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def timestamped_name(desired_name: str, stamp: int, *, max_length: int = MAX_NAME_LENGTH) -> str:
    """Insert ``_<stamp>`` before the extension, shortening the stem to fit.

    Examples:
        >>> timestamped_name("Invoice.pdf", 1700000000000)
        'Invoice_1700000000000.pdf'
    """
    stem, suffix = split_extension(desired_name)
    tail = f"_{stamp}{suffix}"
    return f"{stem[: max(0, max_length - len(tail))]}{tail}"


def resolve_name(
    directory: Path,
    desired_name: str,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_length: int = MAX_NAME_LENGTH,
    clock: Callable[[], int] = epoch_millis,
) -> str:
    """Return *desired_name* or a timestamped variant absent from *directory*.

    The clock is re-sampled for every retry and each stamp is strictly
    greater than the last, so two calls inside one clock tick still move
    forward. Raises :class:`CollisionUnresolved` after *max_retries*
    timestamped candidates are all taken.
    """
    if not (directory / desired_name).exists():
        return desired_name

    last_stamp = -1
    for _attempt in range(max_retries):
        stamp = max(clock(), last_stamp + 1)
        last_stamp = stamp
        candidate = timestamped_name(desired_name, stamp, max_length=max_length)
        if not (directory / candidate).exists():
            logger.debug("Name %s taken, using %s", desired_name, candidate)
            return candidate

    raise CollisionUnresolved(desired_name, max_retries + 1)
