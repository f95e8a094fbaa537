# services/schemas/slices.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProbeRequest(BaseModel):
    url: str = Field(..., min_length=1, examples=["https://example.com/podcast/episode-314.mp3"])


class FrameHeaderSchema(BaseModel):
    sync_word: int = Field(..., examples=[0xFFF])
    version: int = Field(..., examples=[1])
    layer: int = Field(..., examples=[1])
    protection_bit: int = Field(..., ge=0, le=1)
    bit_rate_kbps: int = Field(..., examples=[128])
    frequency_hz: int = Field(..., examples=[44100])
    padding_bit: int = Field(..., ge=0, le=1)
    channel_mode: int = Field(..., description="Channel count", examples=[2])


class ProbeResponse(BaseModel):
    url: str
    offset: int = Field(..., ge=0, description="Absolute byte position of the first frame header")
    header: FrameHeaderSchema


class SliceRequest(BaseModel):
    url: str = Field(..., min_length=1)
    start: float = Field(..., ge=0, description="Start time in seconds", examples=[0])
    end: float = Field(..., ge=0, description="End time in seconds", examples=[30])


class ByteRangeSchema(BaseModel):
    offset: int = Field(..., ge=0)
    start_byte: int = Field(..., ge=0)
    end_byte: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    range_header: str = Field(..., examples=["bytes=0-491519"])


class SliceDownloadRequest(SliceRequest):
    file_name: str = Field(..., min_length=1, description="Relative path under the output root",
                           examples=["episode-314/intro.mp3"])


class SliceDownloadResponse(BaseModel):
    started_at: Optional[datetime]
    finished_at: Optional[datetime]
    dest: str
    probe_window: Optional[str] = Field(None, examples=["head"])
    header_offset: Optional[int] = None
    start_byte: Optional[int] = None
    end_byte: Optional[int] = None
    clamped: bool = False
    bytes_written: int = 0
