# mp3slice/services/http/requests_range_source.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import requests

from mp3slice.common.http.range_header import (
    build_range_header,
    parse_content_length,
    parse_content_range,
)
from mp3slice.common.logging import get_logger
from mp3slice.common.settings import get_settings
from mp3slice.domain.errors import RangeFetchError, RangeNotSatisfiable
from mp3slice.domain.ports.range_source import RangeSourcePort

logger = get_logger(__name__)


class RequestsRangeSource(RangeSourcePort):
    """
    Infrastructure adapter implementing RangeSourcePort over HTTP(S) with `requests`.
    One instance per remote URL. Safe to share a Session across calls, not across threads.
    """

    def __init__(
        self,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout_sec: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        if not url:
            raise RangeFetchError("No URL provided to RequestsRangeSource.")
        cfg = get_settings()
        self.url = url
        self.session = session or requests.Session()
        self.timeout_sec = float(timeout_sec or cfg.http.timeout_sec)
        self.user_agent = user_agent or cfg.http.user_agent

    # ---- Port API -------------------------------------------------------------
    def read_range(self, start: int, end: int) -> bytes:
        resp = self._get(start, end, stream=False)
        try:
            body = resp.content
        finally:
            resp.close()
        if resp.status_code == 200:
            # Server ignored Range and sent the whole resource.
            return body[start:end + 1]
        self._check_served_start(resp, start)
        return body

    def stream_range(self, start: int, end: int, dest: Path, *, chunk_size: int = 64 * 1024) -> int:
        dest = Path(dest)
        dest.parent.mkdir(parents=True, exist_ok=True)

        expected = end - start + 1
        written = 0
        resp = self._get(start, end, stream=True)
        try:
            if resp.status_code == 200 and start > 0:
                raise RangeFetchError(
                    "Server ignored Range header for a non-zero start byte",
                    url=self.url,
                    status_code=resp.status_code,
                )
            if resp.status_code == 206:
                self._check_served_start(resp, start)
            try:
                with dest.open("wb") as f:
                    for chunk in resp.iter_content(chunk_size=chunk_size):
                        if not chunk:
                            continue
                        # a 200 reply carries the whole file; stop at the requested end
                        remaining = expected - written
                        if remaining <= 0:
                            break
                        if len(chunk) > remaining:
                            chunk = chunk[:remaining]
                        f.write(chunk)
                        written += len(chunk)
            except requests.RequestException as e:
                dest.unlink(missing_ok=True)
                raise RangeFetchError(f"Transfer failed after {written} bytes: {e}", url=self.url) from e
        finally:
            resp.close()

        logger.debug("Wrote %d bytes of %s to %s", written, self.url, dest)
        return written

    def content_length(self) -> Optional[int]:
        try:
            resp = self.session.head(
                self.url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_sec,
                allow_redirects=True,
            )
        except requests.RequestException as e:
            raise RangeFetchError(f"HEAD request failed: {e}", url=self.url) from e
        if not resp.ok:
            raise RangeFetchError(
                f"HEAD returned {resp.status_code}", url=self.url, status_code=resp.status_code
            )
        return parse_content_length(resp.headers)

    # ---- helpers --------------------------------------------------------------
    def _check_served_start(self, resp: requests.Response, start: int) -> None:
        served = parse_content_range(resp.headers.get("content-range"))
        if served is not None and served[0] is not None and served[0] != start:
            raise RangeFetchError(
                f"Server answered bytes {served[0]}-{served[1]} for a request starting at {start}",
                url=self.url,
                status_code=resp.status_code,
            )

    def _get(self, start: int, end: int, *, stream: bool) -> requests.Response:
        headers = {
            "Range": build_range_header(start, end),
            "User-Agent": self.user_agent,
        }
        logger.debug("GET %s Range: %s", self.url, headers["Range"])
        try:
            resp = self.session.get(self.url, headers=headers, timeout=self.timeout_sec, stream=stream)
        except requests.RequestException as e:
            raise RangeFetchError(f"GET request failed: {e}", url=self.url) from e

        if resp.status_code == 416:
            resp.close()
            raise RangeNotSatisfiable(
                f"Range {headers['Range']} not satisfiable", url=self.url, status_code=416
            )
        if resp.status_code not in (200, 206):
            resp.close()
            raise RangeFetchError(
                f"GET returned {resp.status_code}", url=self.url, status_code=resp.status_code
            )
        return resp
