# mp3slice/domain/policies/mpeg_tables.py
from __future__ import annotations

# MPEG-1 Layer III only. Index = 4-bit code from the header.
BIT_RATE_KBPS: tuple[int, ...] = (0, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 0)

# Index 3 is reserved.
FREQUENCY_HZ: tuple[int, ...] = (44100, 48000, 32000)

# stereo, joint stereo, dual channel, mono
CHANNEL_COUNT: tuple[int, ...] = (2, 2, 2, 1)

SYNC_WORD = 0xFFF
MPEG_VERSION_1 = 1
LAYER_III = 1  # bit pattern 01
HEADER_SIZE = 4
SAMPLES_PER_FRAME = 1152
