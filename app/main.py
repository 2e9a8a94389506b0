#!/usr/bin/env python3
"""Main application entry point."""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

import config
from app.providers import DIContainer
from app.transport.slack import commands_router, health_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    """Configure root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(container: Optional[DIContainer] = None) -> FastAPI:
    """Build FastAPI app. A prebuilt container is used as-is (tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown."""
        logger.info("Planbot starting...")
        if getattr(app.state, "container", None) is None:
            app.state.container = DIContainer()
        yield
        logger.info("Planbot shutting down...")
        await app.state.container.cleanup()

    app = FastAPI(
        title="Planbot",
        description="Planning Poker slash command for Slack",
        version=config.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    app.include_router(health_router, prefix="/health", tags=["health"])
    app.include_router(commands_router, prefix="/slack", tags=["slack"])
    return app


def main(host: str = config.HOST, port: int = config.PORT, log_level: str = config.LOG_LEVEL) -> None:
    """Main application function."""
    import uvicorn

    setup_logging(log_level)
    uvicorn.run(create_app(), host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Planning Poker slash command server")
    parser.add_argument("--host", default=config.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=config.PORT, help="Bind port")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args()
    main(host=args.host, port=args.port, log_level=args.log_level)
