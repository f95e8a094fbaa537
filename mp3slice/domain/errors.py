# mp3slice/domain/errors.py
from __future__ import annotations

from typing import Optional


class Mp3SliceError(Exception):
    """Base class for everything the slicing core raises."""


class HeaderNotFound(Mp3SliceError):
    """No 4-byte window in the probe buffer is a valid MPEG-1 Layer III header."""

    def __init__(self, message: str = "Header not found", *, buffer_size: Optional[int] = None):
        super().__init__(message)
        self.buffer_size = buffer_size


class MalformedInput(Mp3SliceError):
    """Caller handed the core something it cannot work with (short buffer, bad times)."""


class ShortProbeBuffer(HeaderNotFound, MalformedInput):
    """Probe buffer too short to hold a single header."""


class InvalidHeaderForMapping(Mp3SliceError):
    """Header located, but its bit rate or sample rate is zero (free format / reserved)."""

    def __init__(self, message: str, *, bit_rate_kbps: int = 0, frequency_hz: int = 0):
        super().__init__(message)
        self.bit_rate_kbps = bit_rate_kbps
        self.frequency_hz = frequency_hz


class RangeFetchError(Mp3SliceError):
    """Adapter-level error for ranged HTTP failures."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RangeNotSatisfiable(RangeFetchError):
    """Requested start byte lies beyond the end of the remote resource."""
