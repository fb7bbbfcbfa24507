from typing import Any
from urllib.parse import urlparse

MAX_URL_LENGTH = 200

YOUTUBE_HOSTS = ("youtube.com", "www.youtube.com", "m.youtube.com", "youtu.be")
INSTAGRAM_HOSTS = ("instagram.com", "www.instagram.com")
INSTAGRAM_PATH_PREFIXES = ("/reel/", "/p/")

YOUTUBE = "youtube"
INSTAGRAM = "instagram"


def _parse(url: Any):
    # returns None for anything that isn't an absolute URL
    if not isinstance(url, str) or not url:
        return None
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not host:
        return None
    return parsed


def is_valid_youtube_url(url: Any) -> bool:
    parsed = _parse(url)
    if parsed is None:
        return False
    return parsed.hostname in YOUTUBE_HOSTS and len(url) < MAX_URL_LENGTH


def is_valid_instagram_url(url: Any) -> bool:
    parsed = _parse(url)
    if parsed is None:
        return False
    return (
        parsed.hostname in INSTAGRAM_HOSTS
        and parsed.path.startswith(INSTAGRAM_PATH_PREFIXES)
        and len(url) < MAX_URL_LENGTH
    )
