from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from mp3slice.common.logging import get_logger
from mp3slice.common.settings import get_settings
from mp3slice.domain.dataclasses.reports import SliceReport
from mp3slice.domain.entities.byte_range import ByteRange
from mp3slice.domain.entities.frame_header import HeaderLocation
from mp3slice.domain.enums.probe_window import ProbeWindow
from mp3slice.domain.errors import HeaderNotFound, Mp3SliceError, RangeNotSatisfiable
from mp3slice.domain.policies.frame_scanner import scan
from mp3slice.domain.policies.time_range_mapper import map_range
from mp3slice.domain.ports.range_source import RangeSourcePort

logger = get_logger(__name__)


class SliceService:
    """
    Ranged fetch orchestrator: probe -> scan -> map -> stream.
    All remote I/O goes through the injected RangeSourcePort.
    """

    def __init__(self, source: RangeSourcePort, *, windows: Optional[Iterable[ProbeWindow | str]] = None):
        self.source = source
        self.cfg = get_settings()
        chosen = list(windows) if windows is not None else list(self.cfg.slicing.windows)
        if not chosen:
            raise ValueError("SliceService needs at least one probe window")
        self.windows: List[ProbeWindow] = [ProbeWindow(w) for w in chosen]

    def probe(self) -> HeaderLocation:
        """
        Locate the first frame header. Offsets in the result are absolute
        positions in the remote resource, not in the probe buffer.
        """
        loc, _ = self._locate()
        return loc

    def _locate(self) -> Tuple[HeaderLocation, ProbeWindow]:
        """Try each probe window in order; a window past EOF counts as empty."""
        last_err: Optional[Mp3SliceError] = None
        for window in self.windows:
            try:
                buf = self.source.read_range(window.start, window.last_byte)
            except RangeNotSatisfiable as e:
                logger.info("%s window lies past end of resource: %s", window, e)
                last_err = e
                continue
            try:
                loc = scan(buf)
            except HeaderNotFound as e:
                logger.info("No frame header in %s window (%d bytes): %s", window, len(buf), e)
                last_err = e
                continue
            absolute = loc.shifted(window.start)
            logger.info(
                "Frame header at byte %d (%s window): %d kbps, %d Hz",
                absolute.offset, window, absolute.header.bit_rate_kbps, absolute.header.frequency_hz,
            )
            return absolute, window
        if isinstance(last_err, HeaderNotFound):
            raise last_err
        tried = ", ".join(str(w) for w in self.windows)
        raise HeaderNotFound(f"Header not found in probe windows: {tried}") from last_err

    def plan(self, start_time: float, end_time: float, location: Optional[HeaderLocation] = None) -> ByteRange:
        loc = location or self.probe()
        rng = map_range(loc.header, loc.offset, start_time, end_time)
        logger.info("Slice %ss-%ss -> %s", start_time, end_time, rng.as_range_header())
        return rng

    def download(
        self,
        start_time: float,
        end_time: float,
        dest: Path | str,
        *,
        location: Optional[HeaderLocation] = None,
        url: str = "",
    ) -> SliceReport:
        report = SliceReport(url=url, dest=str(dest), start_time=start_time, end_time=end_time)
        report.start()
        try:
            if location is None:
                loc, window = self._locate()
                report.probe_window = str(window)
            else:
                loc = location
            report.header_offset = loc.offset
            rng = self.plan(start_time, end_time, location=loc)

            if self.cfg.slicing.clamp_to_content_length:
                total = self.source.content_length()
                if total is not None:
                    if rng.start_byte >= total:
                        raise RangeNotSatisfiable(
                            f"start byte {rng.start_byte} is past end of resource ({total} bytes)",
                            url=url or None,
                        )
                    clamped = rng.clamp(total)
                    report.clamped = clamped != rng
                    rng = clamped

            report.start_byte = rng.start_byte
            report.end_byte = rng.end_byte
            report.bytes_written = self.source.stream_range(
                rng.start_byte, rng.end_byte, Path(dest), chunk_size=self.cfg.http.chunk_size
            )
            logger.info("Wrote %d bytes to %s", report.bytes_written, dest)
        except Mp3SliceError as e:
            logger.warning("Slice of %s to %s failed: %s", url or "<source>", dest, e)
            raise
        finally:
            report.stop()
        return report

    def file_size(self) -> Optional[int]:
        return self.source.content_length()
