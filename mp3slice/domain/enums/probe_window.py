# mp3slice/domain/enums/probe_window.py
from __future__ import annotations

from enum import StrEnum

_ONE_MIB = 1_048_576


class ProbeWindow(StrEnum):
    """Which slice of the remote file is fetched to look for the first frame header."""
    HEAD = "head"                    # [0, 1 MiB)
    SKIP_METADATA = "skip_metadata"  # [1 MiB, 1 MiB + 1 KiB), past leading ID3 tags

    @property
    def start(self) -> int:
        return 0 if self is ProbeWindow.HEAD else _ONE_MIB

    @property
    def stop(self) -> int:
        """Exclusive upper bound."""
        return _ONE_MIB if self is ProbeWindow.HEAD else _ONE_MIB + 1024

    @property
    def last_byte(self) -> int:
        return self.stop - 1
