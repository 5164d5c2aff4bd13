"""Entry point for the Account API.

This script starts the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example on a
hosting platform where you only specify a single Python file to run.

Configuration such as PORT, EMAIL_USER and EMAIL_PASS can be placed in
a `.env` file in the same directory.  See `.env.example` for the list of
supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from account_api.app.core.config import settings
from account_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port are read from the `HOST` and `PORT` environment
    variables.  Defaults are `0.0.0.0` and `3000`.
    """
    logger = logging.getLogger(__name__)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    if settings.render:
        logger.info("Running on Render. Public URL will be provided by Render dashboard.")
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
