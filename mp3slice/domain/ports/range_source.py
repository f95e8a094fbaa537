from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol

class RangeSourcePort(Protocol):
    # Inclusive byte positions on both ends.
    def read_range(self, start: int, end: int) -> bytes: ...
    def stream_range(self, start: int, end: int, dest: Path, *, chunk_size: int = 64 * 1024) -> int: ...
    def content_length(self) -> Optional[int]: ...
