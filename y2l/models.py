from typing import Any, Dict, Optional

from pydantic import BaseModel

DEFAULT_REEL_TITLE = "Instagram Reel"
DESCRIPTION_TITLE_LENGTH = 100


class MediaRequest(BaseModel):
    # left optional so a missing url is reported as an invalid URL, not a schema error
    url: Optional[str] = None


class MediaInfo(BaseModel):
    title: str = ""
    duration: int = 0
    thumbnail: str = ""
    author: str = ""


def _duration_of(data: Dict[str, Any]) -> int:
    raw = data.get("duration")
    try:
        duration = int(raw or 0)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(duration, 0)


def _author_of(data: Dict[str, Any]) -> str:
    return data.get("uploader") or data.get("channel") or ""


def video_info_from_dump(data: Dict[str, Any]) -> MediaInfo:
    return MediaInfo(
        title=data.get("title") or "",
        duration=_duration_of(data),
        thumbnail=data.get("thumbnail") or "",
        author=_author_of(data),
    )


def reel_info_from_dump(data: Dict[str, Any]) -> MediaInfo:
    # reels often have no title, the caption is the next best thing
    title = data.get("title")
    if not title and data.get("description"):
        title = data["description"][:DESCRIPTION_TITLE_LENGTH]
    return MediaInfo(
        title=title or DEFAULT_REEL_TITLE,
        duration=_duration_of(data),
        thumbnail=data.get("thumbnail") or "",
        author=_author_of(data),
    )
