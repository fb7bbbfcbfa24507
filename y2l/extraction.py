import subprocess
import threading
from collections import deque
from typing import Any, Dict, Iterator, List

import yt_dlp

from y2l import config, log
from y2l.errors import ExtractionError
from y2l.formatting import content_disposition, format_duration, sanitize_filename
from y2l.models import MediaInfo, reel_info_from_dump, video_info_from_dump
from y2l.validation import INSTAGRAM, YOUTUBE

VIDEO_FORMAT = "bestvideo[ext=mp4]+bestaudio[ext=m4a]/best[ext=mp4]/best"
AUDIO_FORMAT = "bestaudio"
REEL_FORMAT = "best[ext=mp4]/best"

STDERR_TAIL_LINES = 20
TERMINATE_GRACE_S = 5


def _command(*args: str) -> List[str]:
    return config.ytdlp_base_command() + ["--no-playlist", *args]


def _ydl_opts() -> Dict[str, Any]:
    return {
        "quiet": True,
        "no_warnings": True,
        "noplaylist": True,
        "skip_download": True,
        "socket_timeout": config.YTDLP_INFO_TIMEOUT_S,
    }


def _extract(url: str) -> Dict[str, Any]:
    with yt_dlp.YoutubeDL(_ydl_opts()) as ydl:
        return ydl.extract_info(url, download=False)


def fetch_info(url: str, platform: str = YOUTUBE) -> MediaInfo:
    try:
        data = _extract(url)
    except yt_dlp.utils.DownloadError as exc:
        log.e(f"yt-dlp {platform} info error", str(exc))
        raise ExtractionError("yt-dlp info extraction failed", str(exc)) from exc
    if not isinstance(data, dict):
        raise ExtractionError("yt-dlp produced unexpected info")

    info = reel_info_from_dump(data) if platform == INSTAGRAM else video_info_from_dump(data)
    log.i(f"Fetched {platform} info: '{info.title}' ({format_duration(info.duration)})")
    return info


def fetch_title(url: str) -> str:
    """Best-effort title lookup; an empty string means "use the fallback name"."""
    try:
        data = _extract(url)
    except yt_dlp.utils.DownloadError as exc:
        log.w("Title lookup failed", str(exc))
        return ""
    if not isinstance(data, dict):
        return ""
    return str(data.get("title") or "").strip()


class MediaStream:
    """A running yt-dlp process whose stdout is the media payload.

    Iterate `chunks()` to forward the bytes. `close()` stops the process if it
    is still running and is safe to call any number of times.
    """

    def __init__(self, proc: subprocess.Popen, media_type: str, filename: str, ext: str):
        self.proc = proc
        self.media_type = media_type
        self.filename = filename
        self.ext = ext
        self.stderr_tail = deque(maxlen=STDERR_TAIL_LINES)
        self._started = False
        self._stderr_thread = threading.Thread(target=self._drain_stderr, daemon=True)
        self._stderr_thread.start()

    @property
    def headers(self) -> Dict[str, str]:
        return {"Content-Disposition": content_disposition(self.filename, self.ext)}

    def _drain_stderr(self):
        if self.proc.stderr is None:
            return
        try:
            for line in iter(self.proc.stderr.readline, b""):
                text = line.decode("utf-8", "replace").strip()
                if text:
                    self.stderr_tail.append(text)
        except (OSError, ValueError):
            # pipe closed underneath us during cleanup
            return

    def chunks(self) -> Iterator[bytes]:
        self._started = True
        try:
            for chunk in iter(lambda: self.proc.stdout.read(config.STREAM_CHUNK_SIZE), b""):
                yield chunk
            code = self.proc.wait()
            if code != 0:
                self._stderr_thread.join(timeout=1)
                log.e(
                    f"yt-dlp stream for '{self.filename}' exited with {code} after streaming began",
                    "\n".join(self.stderr_tail),
                )
            else:
                log.d(f"Finished streaming '{self.filename}.{self.ext}'")
        finally:
            self.close()
            self._close_pipes()

    def close(self):
        if self.proc.poll() is not None:
            if not self._started:
                self._close_pipes()
            return
        log.w(f"Stopping yt-dlp for '{self.filename}' before it finished")
        self.proc.terminate()
        try:
            self.proc.wait(timeout=TERMINATE_GRACE_S)
        except subprocess.TimeoutExpired:
            self.proc.kill()
            self.proc.wait()
        if not self._started:
            self._close_pipes()

    def _close_pipes(self):
        for pipe in (self.proc.stdout, self.proc.stderr):
            if pipe is not None:
                pipe.close()


def _open_stream(url: str, format_args: List[str], media_type: str, ext: str, fallback: str) -> MediaStream:
    name = sanitize_filename(fetch_title(url), fallback)
    cmd = _command(*format_args, "-o", "-", url)
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, bufsize=0)
    except OSError as exc:
        raise ExtractionError("yt-dlp could not be launched for streaming") from exc
    log.i(f"Streaming '{name}.{ext}' as {media_type}")
    return MediaStream(proc, media_type, name, ext)


def download_video(url: str) -> MediaStream:
    return _open_stream(
        url, ["-f", VIDEO_FORMAT, "--merge-output-format", "mp4"], "video/mp4", "mp4", "video",
    )


def download_audio(url: str) -> MediaStream:
    return _open_stream(url, ["-f", AUDIO_FORMAT], "audio/webm", "webm", "audio")


def download_reel(url: str) -> MediaStream:
    return _open_stream(url, ["-f", REEL_FORMAT], "video/mp4", "mp4", "reel")
