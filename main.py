import uvicorn

from y2l import config, log


def run():
    log.i(f"y2l is running at {config.HOST}:{config.PORT}")
    uvicorn.run(
        "y2l.app:app",
        host=config.HOST,
        port=config.PORT,
        log_level="debug" if config.LOG_LEVEL in ("trace", "debug", "local") else config.LOG_LEVEL,
    )


if __name__ == "__main__":
    run()
