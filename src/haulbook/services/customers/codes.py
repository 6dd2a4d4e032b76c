"""Sequential customer code numbering."""

from __future__ import annotations

import functools
import re
from typing import Iterable, Optional

from ...middleware.exceptions import StoreError

DEFAULT_PREFIX = "C"
DEFAULT_DIGITS = 6


@functools.lru_cache(maxsize=8)
def _code_pattern(prefix: str, digits: int) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(prefix)}(\d{{{digits}}})(?!\d)")


def code_number(code: Optional[str], prefix: str = DEFAULT_PREFIX, digits: int = DEFAULT_DIGITS) -> Optional[int]:
    """Numeric part of the first ``<prefix><digits>`` run inside ``code``, if any."""
    if not code:
        return None
    match = _code_pattern(prefix, digits).search(code)
    return int(match.group(1)) if match else None


def next_customer_code(
    existing_codes: Iterable[Optional[str]],
    prefix: str = DEFAULT_PREFIX,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Return ``prefix`` + (highest matched number + 1), zero-padded to ``digits``.

    Codes that do not contain the pattern are ignored; with no matches the
    sequence starts at 1.
    """
    numbers = [n for n in (code_number(code, prefix, digits) for code in existing_codes) if n is not None]
    candidate = max(numbers, default=0) + 1
    if candidate >= 10**digits:
        raise StoreError(f"Customer code space exhausted: {prefix}{candidate} exceeds {digits} digits")
    return f"{prefix}{candidate:0{digits}d}"
