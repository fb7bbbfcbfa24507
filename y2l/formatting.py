import re
from urllib.parse import quote

MAX_FILENAME_LENGTH = 100

# ASCII word characters only
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")


def format_duration(seconds: int) -> str:
    seconds = max(int(seconds or 0), 0)
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


def sanitize_filename(title: str, fallback: str) -> str:
    safe = _UNSAFE_FILENAME_CHARS.sub("", title or fallback).strip()[:MAX_FILENAME_LENGTH]
    return safe or fallback


def content_disposition(name: str, ext: str) -> str:
    # same escaping as the browser's encodeURIComponent
    encoded = quote(name, safe="-_.!~*'()")
    return f'attachment; filename="{encoded}.{ext}"'
