# mp3slice/services/api/deps.py
from __future__ import annotations
from typing import Callable

from mp3slice.domain.ports.range_source import RangeSourcePort
from mp3slice.services.http.requests_range_source import RequestsRangeSource

RangeSourceFactory = Callable[[str], RangeSourcePort]


def get_range_source_factory() -> RangeSourceFactory:
    """
    Provide a url -> RangeSourcePort factory via DI.
    Tests override this to serve bytes from memory.
    """
    return lambda url: RequestsRangeSource(url)
