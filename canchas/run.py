"""Run the canchas reservation API with Uvicorn.

Host and port come from ``HOST`` and ``PORT`` (see ``canchas.core.config``).

Usage:
    python -m canchas.run
"""
from uvicorn import Config, Server

from canchas.core.config import settings


def main() -> None:
    config = Config(
        app="canchas.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    main()
