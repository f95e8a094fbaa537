# mp3slice/services/mappers/slices.py
from __future__ import annotations

from dataclasses import asdict

from mp3slice.domain.dataclasses.reports import SliceReport
from mp3slice.domain.entities.byte_range import ByteRange
from mp3slice.domain.entities.frame_header import HeaderLocation
from mp3slice.services.schemas.slices import (
    ByteRangeSchema,
    FrameHeaderSchema,
    ProbeResponse,
    SliceDownloadResponse,
)


def to_probe_response(url: str, loc: HeaderLocation) -> ProbeResponse:
    return ProbeResponse(url=url, offset=loc.offset, header=FrameHeaderSchema(**asdict(loc.header)))


def to_byte_range_schema(rng: ByteRange, *, offset: int) -> ByteRangeSchema:
    return ByteRangeSchema(
        offset=offset,
        start_byte=rng.start_byte,
        end_byte=rng.end_byte,
        length=rng.length,
        range_header=rng.as_range_header(),
    )


def to_download_response(report: SliceReport) -> SliceDownloadResponse:
    return SliceDownloadResponse(
        started_at=report.started_at,
        finished_at=report.finished_at,
        dest=report.dest,
        probe_window=report.probe_window,
        header_offset=report.header_offset,
        start_byte=report.start_byte,
        end_byte=report.end_byte,
        clamped=report.clamped,
        bytes_written=report.bytes_written,
    )
