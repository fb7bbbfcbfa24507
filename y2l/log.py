import sys
import traceback
from typing import Any, List, Tuple

from uvicorn.server import logger

from y2l import config

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.LOG_LEVEL == "local":
        return True
    current_level = _LEVELS.get(config.LOG_LEVEL, 2)
    return _LEVELS.get(level.lower(), 2) >= current_level


def _format_args(*args: Any) -> Tuple[str, List[BaseException]]:
    exceptions = [a for a in args if isinstance(a, BaseException)]
    parts = [
        f"! {type(a).__name__}: {a}" if isinstance(a, BaseException) else str(a)
        for a in args
    ]
    if len(parts) <= 1:
        return "".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _trace_of(exception: BaseException) -> str:
    if not exception.__traceback__:
        return ""
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _log_message(level: str, message: str, exceptions: List[BaseException]) -> str:
    if config.LOG_LEVEL == "local":
        print(f"[{level[0]}] {message}")
        for exception in exceptions:
            print(f" ‼  {type(exception).__name__}: {exception}", file=sys.stderr)
            if trace := _trace_of(exception):
                print(trace, file=sys.stderr)
        return message

    if _should_log(level):
        if level in ("trace", "debug"):
            logger.debug(message)
        elif level == "info":
            logger.info(message)
        elif level == "warning":
            logger.warning(message)
        else:
            logger.error(message)
    for exception in exceptions:
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("trace", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("debug", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("info", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("warning", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("error", message, exceptions)
