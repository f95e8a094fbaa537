# mp3slice/domain/entities/byte_range.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ByteRange:
    """Inclusive [start_byte, end_byte] window, absolute within the remote resource."""
    start_byte: int
    end_byte: int

    def __post_init__(self) -> None:
        if self.start_byte < 0 or self.end_byte < 0:
            raise ValueError(f"byte positions must be >= 0, got {self.start_byte}-{self.end_byte}")

    @property
    def length(self) -> int:
        return max(0, self.end_byte - self.start_byte + 1)

    def as_range_header(self) -> str:
        return f"bytes={self.start_byte}-{self.end_byte}"

    def clamp(self, total_size: int) -> "ByteRange":
        """Limit end_byte to the last byte of a resource of `total_size` bytes."""
        last = max(0, total_size - 1)
        return ByteRange(start_byte=self.start_byte, end_byte=min(self.end_byte, last))
