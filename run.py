#!/usr/bin/env python3
"""Run script for the showcase API."""

import logging

import uvicorn

from showcase.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"API health: http://localhost:{settings.port}/api/health")
    uvicorn.run(
        "showcase.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
