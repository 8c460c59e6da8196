"""Entry point for the StreamStore API server.

Launches the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker where only a single
Python file is specified.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).  Everything else is
configured through the variables documented in
``streamstore_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from streamstore_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%s", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
