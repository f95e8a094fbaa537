from __future__ import annotations

import pytest

from mp3slice.domain.errors import HeaderNotFound, MalformedInput, ShortProbeBuffer
from mp3slice.domain.policies.frame_scanner import decode_header, scan
from mp3slice.domain.policies.mpeg_tables import BIT_RATE_KBPS, FREQUENCY_HZ


def _header(bit_rate_code: int = 9, freq_code: int = 0, *, padding: int = 0,
            protection: int = 1, mode: int = 0) -> bytes:
    b1 = 0xF0 | (1 << 3) | (1 << 1) | protection
    b2 = (bit_rate_code << 4) | (freq_code << 2) | (padding << 1)
    b3 = mode << 6
    return bytes([0xFF, b1, b2, b3])


# -------------------------
# decode_header
# -------------------------

def test_decode_reference_header():
    h = decode_header(bytes([0xFF, 0xFB, 0x90, 0x00]))
    assert h is not None
    assert h.sync_word == 0xFFF
    assert h.version == 1
    assert h.layer == 1
    assert h.protection_bit == 1
    assert h.bit_rate_kbps == 128
    assert h.frequency_hz == 44100
    assert h.padding_bit == 0
    assert h.channel_mode == 2
    assert h.is_mono is False


def test_decode_reads_padding_and_mono():
    h = decode_header(_header(bit_rate_code=14, freq_code=1, padding=1, protection=0, mode=3))
    assert h is not None
    assert h.bit_rate_kbps == 320
    assert h.frequency_hz == 48000
    assert h.padding_bit == 1
    assert h.protection_bit == 0
    assert h.channel_mode == 1
    assert h.is_mono


@pytest.mark.parametrize("mode,channels", [(0, 2), (1, 2), (2, 2), (3, 1)])
def test_decode_channel_modes(mode, channels):
    h = decode_header(_header(mode=mode))
    assert h is not None and h.channel_mode == channels


@pytest.mark.parametrize(
    "raw,why",
    [
        (bytes([0xFE, 0xFB, 0x90, 0x00]), "sync word"),
        (bytes([0xFF, 0xEB, 0x90, 0x00]), "sync word low nibble"),
        (bytes([0xFF, 0xF3, 0x90, 0x00]), "MPEG-2 version bit"),
        (bytes([0xFF, 0xFD, 0x90, 0x00]), "layer II"),
        (bytes([0xFF, 0xFF, 0x90, 0x00]), "layer I"),
        (bytes([0xFF, 0xF9, 0x90, 0x00]), "reserved layer"),
        (bytes([0xFF, 0xFB, 0x9C, 0x00]), "reserved frequency code"),
    ],
)
def test_decode_rejects(raw, why):
    assert decode_header(raw) is None, why


def test_decode_accepts_free_format_bitrate_as_zero():
    # codes 0 and 15 are structurally fine; the mapper refuses them
    assert decode_header(_header(bit_rate_code=0)).bit_rate_kbps == 0
    assert decode_header(_header(bit_rate_code=15)).bit_rate_kbps == 0
    assert decode_header(_header(bit_rate_code=0)).is_mappable is False


def test_decode_out_of_bounds_returns_none():
    buf = _header()
    assert decode_header(buf, 1) is None
    assert decode_header(buf[:3]) is None
    assert decode_header(buf, -1) is None


def test_decode_treats_signed_values_as_unsigned():
    # -1 / -5 / -112 are 0xFF / 0xFB / 0x90 as signed bytes
    h = decode_header([-1, -5, -112, 0])
    assert h is not None
    assert h.bit_rate_kbps == 128


# -------------------------
# scan
# -------------------------

@pytest.mark.parametrize("code", range(1, 15))
@pytest.mark.parametrize("freq", range(3))
def test_scan_finds_every_mappable_combination(code, freq):
    loc = scan(bytes(7) + _header(code, freq) + bytes(20))
    assert loc.offset == 7
    assert loc.header.bit_rate_kbps == BIT_RATE_KBPS[code]
    assert loc.header.frequency_hz == FREQUENCY_HZ[freq]


def test_scan_after_100_bytes_of_noise():
    noise = bytes((i * 7) % 0x80 for i in range(100))  # never 0xFF
    loc = scan(noise + _header() + bytes(50))
    assert loc.offset == 100


def test_scan_returns_first_match_not_best():
    buf = _header(bit_rate_code=1) + bytes(10) + _header(bit_rate_code=14)
    loc = scan(buf)
    assert loc.offset == 0
    assert loc.header.bit_rate_kbps == 32


def test_scan_skips_near_misses_and_keeps_going():
    near = bytes([0xFF, 0xFB, 0x9C, 0x00])  # reserved frequency
    loc = scan(near + bytes(3) + _header())
    assert loc.offset == 7


def test_scan_header_at_last_possible_position():
    buf = bytes(12) + _header()
    assert scan(buf).offset == 12


def test_scan_truncated_trailing_header_is_not_found():
    buf = bytes(12) + _header()[:3]
    with pytest.raises(HeaderNotFound):
        scan(buf)


@pytest.mark.parametrize("n", [4, 5, 64, 4096])
def test_scan_all_zero_buffer_not_found(n):
    with pytest.raises(HeaderNotFound) as ei:
        scan(bytes(n))
    assert ei.value.buffer_size == n


@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_scan_short_buffer(n):
    with pytest.raises(HeaderNotFound) as ei:
        scan(b"\xff" * n)
    assert isinstance(ei.value, ShortProbeBuffer)
    assert isinstance(ei.value, MalformedInput)


def test_scan_accepts_bytearray_and_memoryview():
    raw = bytes(3) + _header()
    assert scan(bytearray(raw)).offset == 3
    assert scan(memoryview(raw)).offset == 3
    assert scan(list(raw)).offset == 3
