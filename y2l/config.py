import os
import shlex
import sys
from typing import List

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "0.0.0.0")
API_KEY = os.getenv("API_KEY")  # unset = no key required
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").strip().lower()

# yt-dlp ships with the package, run it through the current interpreter by default
YTDLP_COMMAND = os.getenv("YTDLP_COMMAND", "")
YTDLP_EXTRA_ARGS = os.getenv("YTDLP_EXTRA_ARGS", "")
YTDLP_INFO_TIMEOUT_S = float(os.getenv("YTDLP_INFO_TIMEOUT_S", "60"))
STREAM_CHUNK_SIZE = int(os.getenv("STREAM_CHUNK_SIZE", str(64 * 1024)))


def allowed_origins() -> List[str]:
    origins = [o.strip() for o in ALLOW_ORIGINS.split(",") if o.strip()]
    return origins or ["*"]


def ytdlp_base_command() -> List[str]:
    if YTDLP_COMMAND.strip():
        cmd = shlex.split(YTDLP_COMMAND)
    else:
        cmd = [sys.executable, "-m", "yt_dlp"]
    return cmd + shlex.split(YTDLP_EXTRA_ARGS)
