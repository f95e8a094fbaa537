# mp3slice/common/http/range_header.py
from __future__ import annotations

import re
from typing import Mapping, Optional, Tuple

_CONTENT_RANGE = re.compile(r"^\s*bytes\s+(?:(\d+)-(\d+)|\*)/(\d+|\*)\s*$", re.IGNORECASE)


def build_range_header(start: int, end: Optional[int] = None) -> str:
    """
    Build a single-range `Range` header value. Both ends inclusive;
    end=None means "to end of resource".
    """
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    if end is None:
        return f"bytes={start}-"
    if end < start:
        raise ValueError(f"end ({end}) before start ({start})")
    return f"bytes={start}-{end}"


def parse_content_range(value: Optional[str]) -> Optional[Tuple[Optional[int], Optional[int], Optional[int]]]:
    """
    Parse "bytes 0-99/1234", "bytes */1234" or "bytes 0-99/*".
    Returns (start, end, total) with None for '*' parts, or None if absent/unparseable.
    """
    if not value:
        return None
    m = _CONTENT_RANGE.match(value)
    if not m:
        return None
    start_s, end_s, total_s = m.groups()
    start = int(start_s) if start_s is not None else None
    end = int(end_s) if end_s is not None else None
    total = None if total_s == "*" else int(total_s)
    return start, end, total


def parse_content_length(headers: Mapping[str, str]) -> Optional[int]:
    raw = headers.get("content-length") or headers.get("Content-Length")
    if raw is None:
        return None
    try:
        n = int(str(raw).strip())
    except ValueError:
        return None
    return n if n >= 0 else None
