from __future__ import annotations

import re
from typing import Optional

import httpx

from apod.models.metadata import RateLimitInfo

REMAINING_HEADER = "x-ratelimit-remaining"
LIMIT_HEADER = "x-ratelimit-limit"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_counter(value: Optional[str]) -> int:
    # int() alone would accept whitespace and "1_000"
    if value is None or not _INT_RE.fullmatch(value):
        return -1
    parsed = int(value)
    if not _INT32_MIN <= parsed <= _INT32_MAX:
        return -1
    return parsed


def get_rate_limit_info(headers: httpx.Headers) -> RateLimitInfo:
    """Read the rate-limit counters from *headers*.

    Header lookup is case-insensitive.  A missing or non-integer value is
    reported as ``-1``; this function never raises.
    """
    return RateLimitInfo(
        remaining=_parse_counter(headers.get(REMAINING_HEADER)),
        limit=_parse_counter(headers.get(LIMIT_HEADER)),
    )
