# tests/conftest.py
from __future__ import annotations
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Keep module-level get_settings() calls (router prefix, app) away from the CWD.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OUTPUT_ROOT", tempfile.mkdtemp(prefix="mp3slice-test-"))

from mp3slice.common import settings as settings_mod  # noqa: E402

# 128 kbps, 44100 Hz, MPEG-1 Layer III, no CRC, stereo
HEADER_128K_44K = bytes([0xFF, 0xFB, 0x90, 0x00])


class FakeRangeSource:
    """In-memory RangeSourcePort. Records every call for assertions."""

    def __init__(self, data: bytes, *, size: Optional[int] = None):
        self.data = data
        self.size = len(data) if size is None else size
        self.reads: List[Tuple[int, int]] = []
        self.streams: List[Tuple[int, int, Path]] = []
        self.head_calls = 0

    def read_range(self, start: int, end: int) -> bytes:
        self.reads.append((start, end))
        return self.data[start:end + 1]

    def stream_range(self, start: int, end: int, dest: Path, *, chunk_size: int = 64 * 1024) -> int:
        self.streams.append((start, end, Path(dest)))
        body = self.data[start:end + 1]
        Path(dest).parent.mkdir(parents=True, exist_ok=True)
        Path(dest).write_bytes(body)
        return len(body)

    def content_length(self) -> Optional[int]:
        self.head_calls += 1
        return self.size


def mp3_bytes(*, noise: int = 0, header: bytes = HEADER_128K_44K, body: int = 4096, fill: int = 0x00) -> bytes:
    """`noise` zero bytes, then a header, then `body` bytes of filler."""
    return bytes(noise) + header + bytes([fill]) * body


@pytest.fixture()
def settings_env(monkeypatch, tmp_path):
    """
    Fresh Settings per test. Returns a setter: settings_env(KEY="value", ...)
    which updates env vars and clears the cached settings.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("OUTPUT_ROOT", str(tmp_path / "out"))
    settings_mod.get_settings.cache_clear()

    def _set(**env: str):
        for k, v in env.items():
            monkeypatch.setenv(k, v)
        settings_mod.get_settings.cache_clear()
        return settings_mod.get_settings()

    yield _set
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def fake_sources() -> Dict[str, FakeRangeSource]:
    """url -> FakeRangeSource registry used by the API client fixture."""
    return {}


@pytest.fixture()
def api_client(settings_env, fake_sources):
    """
    A TestClient whose range source factory is overridden to serve
    bytes from `fake_sources` instead of the network.
    """
    from starlette.testclient import TestClient

    from mp3slice.services.api.app import create_app
    from mp3slice.services.api.deps import get_range_source_factory

    app = create_app()
    app.dependency_overrides[get_range_source_factory] = lambda: (lambda url: fake_sources[url])
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_mp3():
    return mp3_bytes


@pytest.fixture()
def make_source():
    return FakeRangeSource
