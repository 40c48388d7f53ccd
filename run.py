"""Entry point for running the Record API under Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``record_api.app.core.config``).  Defaults are
``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from record_api.app.core.config import settings
from record_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
