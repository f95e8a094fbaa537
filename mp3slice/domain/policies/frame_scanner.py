# mp3slice/domain/policies/frame_scanner.py
from __future__ import annotations

from typing import Optional, Sequence

from mp3slice.domain.entities.frame_header import FrameHeader, HeaderLocation
from mp3slice.domain.errors import HeaderNotFound, ShortProbeBuffer
from mp3slice.domain.policies.mpeg_tables import (
    BIT_RATE_KBPS,
    CHANNEL_COUNT,
    FREQUENCY_HZ,
    HEADER_SIZE,
    LAYER_III,
    MPEG_VERSION_1,
    SYNC_WORD,
)

ByteSource = Sequence[int]  # bytes, bytearray, memoryview or a list of ints


def decode_header(buffer: ByteSource, i: int = 0) -> Optional[FrameHeader]:
    """
    Decode the 4 bytes at buffer[i:i+4] as an MPEG-1 Layer III frame header.
    Returns None if any structural check fails.

    Bit-rate codes 0 and 15 decode to 0 kbps and are accepted here;
    the mapper refuses them.
    """
    if i < 0 or i + HEADER_SIZE > len(buffer):
        return None
    b0, b1, b2, b3 = (buffer[i + k] & 0xFF for k in range(HEADER_SIZE))

    sync_word = (b0 << 4) | (b1 >> 4)
    if sync_word != SYNC_WORD:
        return None

    version = (b1 >> 3) & 0x1
    if version != MPEG_VERSION_1:
        return None

    layer = (b1 >> 1) & 0x3
    if layer != LAYER_III:
        return None

    protection_bit = b1 & 0x1

    bit_rate_code = b2 >> 4
    if bit_rate_code >= len(BIT_RATE_KBPS):
        return None

    frequency_code = (b2 >> 2) & 0x3
    if frequency_code >= len(FREQUENCY_HZ):
        return None

    padding_bit = (b2 >> 1) & 0x1

    mode_code = b3 >> 6
    if mode_code >= len(CHANNEL_COUNT):
        return None

    return FrameHeader(
        sync_word=sync_word,
        version=version,
        layer=layer,
        protection_bit=protection_bit,
        bit_rate_kbps=BIT_RATE_KBPS[bit_rate_code],
        frequency_hz=FREQUENCY_HZ[frequency_code],
        padding_bit=padding_bit,
        channel_mode=CHANNEL_COUNT[mode_code],
    )


def scan(buffer: ByteSource) -> HeaderLocation:
    """
    Return the first position in `buffer` holding a valid frame header.
    Candidates run from 0 to len(buffer) - 4; a shorter trailing remainder is not scanned.
    """
    n = len(buffer)
    if n < HEADER_SIZE:
        raise ShortProbeBuffer(
            f"Probe buffer of {n} bytes cannot hold a {HEADER_SIZE}-byte header", buffer_size=n
        )

    for i in range(n - HEADER_SIZE + 1):
        header = decode_header(buffer, i)
        if header is None:
            continue
        return HeaderLocation(header=header, offset=i)

    raise HeaderNotFound(f"Header not found in {n} probed bytes", buffer_size=n)
