from .slices import (
    ProbeRequest,
    FrameHeaderSchema,
    ProbeResponse,
    SliceRequest,
    ByteRangeSchema,
    SliceDownloadRequest,
    SliceDownloadResponse,
)

__all__ = [
    "ProbeRequest",
    "FrameHeaderSchema",
    "ProbeResponse",
    "SliceRequest",
    "ByteRangeSchema",
    "SliceDownloadRequest",
    "SliceDownloadResponse",
]
