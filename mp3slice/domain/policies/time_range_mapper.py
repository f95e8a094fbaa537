# mp3slice/domain/policies/time_range_mapper.py
from __future__ import annotations

import math

from mp3slice.domain.entities.byte_range import ByteRange
from mp3slice.domain.entities.frame_header import FrameHeader
from mp3slice.domain.errors import InvalidHeaderForMapping, MalformedInput
from mp3slice.domain.policies.mpeg_tables import SAMPLES_PER_FRAME


def _check_mappable(header: FrameHeader) -> None:
    if header.bit_rate_kbps <= 0 or header.frequency_hz <= 0:
        raise InvalidHeaderForMapping(
            f"Cannot map time to bytes with bit rate {header.bit_rate_kbps} kbps "
            f"and sample rate {header.frequency_hz} Hz",
            bit_rate_kbps=header.bit_rate_kbps,
            frequency_hz=header.frequency_hz,
        )


def _check_time(name: str, value: float) -> float:
    try:
        t = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"{name} must be a number of seconds, got {value!r}") from e
    if math.isnan(t) or math.isinf(t) or t < 0:
        raise MalformedInput(f"{name} must be a finite, non-negative number of seconds, got {value!r}")
    return t


def seconds_to_byte_offset(header: FrameHeader, seconds: float) -> float:
    """
    Unrounded byte position of `seconds` into the audio, relative to the first header.
    CBR assumption: every frame shares the header's bit rate.
    """
    _check_mappable(header)
    seconds = _check_time("seconds", seconds)
    frame_adjustment = 1 - SAMPLES_PER_FRAME / header.frequency_hz
    byte_rate = header.bit_rate_kbps * 1024 / 8
    return seconds * byte_rate * frame_adjustment


def map_range(header: FrameHeader, offset: int, start_time: float, end_time: float) -> ByteRange:
    """
    Convert a [start_time, end_time] window (seconds) into an inclusive byte range.
    Start rounds down and end rounds up so the range never cuts into the window.
    `offset` is the absolute position of the header; no clamping to file size.
    """
    _check_mappable(header)
    if offset < 0:
        raise MalformedInput(f"offset must be >= 0, got {offset}")
    start = _check_time("start_time", start_time)
    end = _check_time("end_time", end_time)
    if end < start:
        raise MalformedInput(f"end_time ({end}) is before start_time ({start})")

    start_byte = math.floor(seconds_to_byte_offset(header, start)) + offset
    end_byte = math.ceil(seconds_to_byte_offset(header, end)) + offset
    return ByteRange(start_byte=start_byte, end_byte=end_byte)
