# mp3slice/services/api/routers/slices.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException

from mp3slice.common.path.safe import safe_join
from mp3slice.common.settings import get_settings
from mp3slice.domain.errors import (
    HeaderNotFound,
    InvalidHeaderForMapping,
    MalformedInput,
    Mp3SliceError,
    RangeFetchError,
    RangeNotSatisfiable,
)
from mp3slice.services.api.deps import RangeSourceFactory, get_range_source_factory
from mp3slice.services.mappers.slices import (
    to_byte_range_schema,
    to_download_response,
    to_probe_response,
)
from mp3slice.services.schemas.slices import (
    ByteRangeSchema,
    ProbeRequest,
    ProbeResponse,
    SliceDownloadRequest,
    SliceDownloadResponse,
    SliceRequest,
)
from mp3slice.services.slicing.service import SliceService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/slices", tags=["slices"])


def _to_http(e: Mp3SliceError) -> HTTPException:
    # order matters: ShortProbeBuffer is both HeaderNotFound and MalformedInput
    if isinstance(e, HeaderNotFound):
        return HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(e))
    if isinstance(e, InvalidHeaderForMapping):
        return HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(e))
    if isinstance(e, MalformedInput):
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    if isinstance(e, RangeNotSatisfiable):
        return HTTPException(status_code=HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE, detail=str(e))
    if isinstance(e, RangeFetchError):
        return HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(e))
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/probe", response_model=ProbeResponse)
def probe_slice_source(
    req: ProbeRequest,
    source_for: RangeSourceFactory = Depends(get_range_source_factory),
) -> ProbeResponse:
    svc = SliceService(source_for(req.url))
    try:
        loc = svc.probe()
    except Mp3SliceError as e:
        raise _to_http(e) from e
    return to_probe_response(req.url, loc)


@router.post("/plan", response_model=ByteRangeSchema)
def plan_slice(
    req: SliceRequest,
    source_for: RangeSourceFactory = Depends(get_range_source_factory),
) -> ByteRangeSchema:
    svc = SliceService(source_for(req.url))
    try:
        loc = svc.probe()
        rng = svc.plan(req.start, req.end, location=loc)
    except Mp3SliceError as e:
        raise _to_http(e) from e
    return to_byte_range_schema(rng, offset=loc.offset)


@router.post("/download", response_model=SliceDownloadResponse)
def download_slice(
    req: SliceDownloadRequest,
    source_for: RangeSourceFactory = Depends(get_range_source_factory),
) -> SliceDownloadResponse:
    settings = get_settings()
    try:
        dest = safe_join(settings.output_root, req.file_name)
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e

    svc = SliceService(source_for(req.url))
    try:
        report = svc.download(req.start, req.end, dest, url=req.url)
    except Mp3SliceError as e:
        raise _to_http(e) from e
    return to_download_response(report)
