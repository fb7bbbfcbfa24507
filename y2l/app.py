from typing import AsyncIterator, Callable, Dict, Optional

import anyio
import anyio.to_thread
from fastapi import FastAPI, Header
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.concurrency import iterate_in_threadpool
from starlette.exceptions import HTTPException
from starlette.types import Receive, Scope, Send

from y2l import config, extraction, log
from y2l.errors import InvalidUrlError, ServiceError, UnauthorizedError
from y2l.models import MediaInfo, MediaRequest
from y2l.validation import INSTAGRAM, YOUTUBE, is_valid_instagram_url, is_valid_youtube_url

app = FastAPI(title="y2l server", docs_url=None, redoc_url=None)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(_, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_api_dict())


@app.exception_handler(HTTPException)
async def http_error_handler(_, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_, exc: RequestValidationError) -> JSONResponse:
    log.d("Rejected request body", exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def check_api_key(x_api_key: Optional[str]):
    if config.API_KEY and x_api_key != config.API_KEY:
        raise UnauthorizedError()


def require_url(req: MediaRequest, validator: Callable[[str], bool], message: str) -> str:
    if not req.url or not validator(req.url):
        raise InvalidUrlError(message)
    return req.url


async def _close_stream(stream: extraction.MediaStream):
    # runs even when the surrounding scope was cancelled; waiting on the child stays off the loop
    with anyio.CancelScope(shield=True):
        await anyio.to_thread.run_sync(stream.close)


async def _stream_body(stream: extraction.MediaStream) -> AsyncIterator[bytes]:
    try:
        async for chunk in iterate_in_threadpool(stream.chunks()):
            yield chunk
    finally:
        await _close_stream(stream)


class MediaResponse(StreamingResponse):
    """Streams a MediaStream and stops its process once the response is over, disconnects included."""

    def __init__(self, stream: extraction.MediaStream):
        super().__init__(_stream_body(stream), media_type=stream.media_type, headers=stream.headers)
        self.stream = stream

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            await _close_stream(self.stream)


def _info(url: str, platform: str, failure: str) -> MediaInfo:
    try:
        return extraction.fetch_info(url, platform)
    except Exception as e:
        log.e(f"{platform} info error", e)
        raise ServiceError(failure) from e


def _download(url: str, start: Callable[[str], extraction.MediaStream], failure: str) -> StreamingResponse:
    try:
        return MediaResponse(start(url))
    except Exception as e:
        log.e("Download error", e)
        raise ServiceError(failure) from e


@app.get("/")
def root() -> Dict[str, str]:
    return {"status": "ok", "message": "y2l server running"}


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/info")
def video_info(req: MediaRequest, x_api_key: Optional[str] = Header(None)) -> MediaInfo:
    check_api_key(x_api_key)
    url = require_url(req, is_valid_youtube_url, "Invalid YouTube URL")
    return _info(url, YOUTUBE, "Failed to fetch video info")


@app.post("/api/download/video")
def download_video(req: MediaRequest, x_api_key: Optional[str] = Header(None)) -> StreamingResponse:
    check_api_key(x_api_key)
    url = require_url(req, is_valid_youtube_url, "Invalid YouTube URL")
    return _download(url, extraction.download_video, "Failed to download video")


@app.post("/api/download/audio")
def download_audio(req: MediaRequest, x_api_key: Optional[str] = Header(None)) -> StreamingResponse:
    check_api_key(x_api_key)
    url = require_url(req, is_valid_youtube_url, "Invalid YouTube URL")
    return _download(url, extraction.download_audio, "Failed to download audio")


@app.post("/api/instagram/info")
def instagram_info(req: MediaRequest, x_api_key: Optional[str] = Header(None)) -> MediaInfo:
    check_api_key(x_api_key)
    url = require_url(req, is_valid_instagram_url, "Invalid Instagram URL")
    return _info(url, INSTAGRAM, "Failed to fetch reel info")


@app.post("/api/instagram/download")
def instagram_download(req: MediaRequest, x_api_key: Optional[str] = Header(None)) -> StreamingResponse:
    check_api_key(x_api_key)
    url = require_url(req, is_valid_instagram_url, "Invalid Instagram URL")
    return _download(url, extraction.download_reel, "Failed to download reel")
