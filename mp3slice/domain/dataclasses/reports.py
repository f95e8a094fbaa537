# mp3slice/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Slice download report
# ---------------------------------------------------------------------------
@dataclass
class SliceReport(BaseReport):
    url: str = ""
    dest: str = ""
    start_time: float = 0.0
    end_time: float = 0.0
    probe_window: Optional[str] = None  # None when the caller supplied the header location
    header_offset: Optional[int] = None
    start_byte: Optional[int] = None
    end_byte: Optional[int] = None
    clamped: bool = False          # end_byte cut back to content length
    bytes_written: int = 0
