# mp3slice/domain/entities/frame_header.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameHeader:
    """
    Decoded fields of a 4-byte MPEG audio frame header.
    Produced by the frame scanner, consumed by the time-range mapper.
    `channel_mode` is the channel count (1 for mono, 2 for the stereo variants).
    """
    sync_word: int
    version: int
    layer: int
    protection_bit: int
    bit_rate_kbps: int
    frequency_hz: int
    padding_bit: int
    channel_mode: int

    @property
    def is_mono(self) -> bool:
        return self.channel_mode == 1

    @property
    def is_mappable(self) -> bool:
        """False for free-format (0 kbps) or reserved sample-rate headers."""
        return self.bit_rate_kbps > 0 and self.frequency_hz > 0


@dataclass(frozen=True)
class HeaderLocation:
    header: FrameHeader
    offset: int  # byte index where the header starts

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    def shifted(self, base: int) -> "HeaderLocation":
        """Same header, offset moved by `base` (probe-relative -> absolute)."""
        return HeaderLocation(header=self.header, offset=self.offset + base)
