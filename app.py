#!/usr/bin/env python3
"""
Emoji URL shortener server.

One process serves requests concurrently on a single event loop. With
WORKERS > 1 uvicorn spawns that many processes from the ``build_app``
factory, each with its own store pool.

Usage:
    python app.py

Settings come from the environment or a .env file (see config.py), e.g.
DATABASE_URL, CREATE_TABLES, REDIS_URL, DOMAIN, PORT, ENVIRONMENT.
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from emojiurl.common.logging_config import setup_logging
from emojiurl.database import create_store
from emojiurl.database.cache import RedisCache
from emojiurl.generator import SlugGenerator
from emojiurl.service import EmojiURLService
from web_app import create_app


async def build_service(config: Config, logger: logging.Logger) -> EmojiURLService:
    """Wire store, optional cache and generator into a service."""
    db = create_store(config.database_url, create_tables=config.create_tables, logger=logger)

    cache = None
    if config.redis_url:
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()

    return EmojiURLService(
        db=db,
        cache=cache,
        slug_generator=SlugGenerator(default_length=config.slug_length),
        logger=logger,
        max_allocation_attempts=config.max_allocation_attempts,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = app.state.logger
    service = await build_service(app.state.config, logger)

    app.state.service = service
    app.state.db = service.db
    app.state.cache = service.cache
    logger.info(
        f"Ready: store={type(service.db).__name__}, "
        f"cache={'on' if service.cache and service.cache.enabled else 'off'}"
    )

    try:
        yield
    finally:
        logger.info("Closing store and cache connections")
        await service.close()


def build_app(config: Optional[Config] = None) -> FastAPI:
    """Create the app with logging set up and the service wired in its lifespan.

    Also the import target uvicorn uses in each worker process.
    """
    config = config or load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = create_app(service_instance=None, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    config = load_config()
    app = build_app(config)
    logger = app.state.logger
    logger.info(
        f"Emoji URL shortener ({config.environment}) for {config.public_scheme}://{config.domain}"
    )

    if config.workers > 1:
        # Worker processes need an import string; uvicorn handles their signals
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "app:build_app",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=False,
        )
        return

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            # LoggingMiddleware writes the access lines
            access_log=False,
        )
    )

    def request_shutdown(signum, frame):
        logger.info(f"Signal {signum} received, shutting down")
        server.should_exit = True

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, request_shutdown)

    try:
        logger.info(f"Listening on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
