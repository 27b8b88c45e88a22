"""Coach API server.

Usage:
    python -m coach_server                     # host/port from env
    python -m coach_server --port 8080 --heuristic
"""

from __future__ import annotations

import argparse
import dataclasses
import logging

import uvicorn

from coach_server.app import create_app
from coach_server.config import STRATEGY_HEURISTIC, Settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Lift Coach API server")
    parser.add_argument("--host", help="Bind address (default: COACH_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (default: COACH_PORT)")
    parser.add_argument(
        "--heuristic",
        action="store_true",
        help="Recommend with the local readiness heuristic instead of the remote coach",
    )
    args = parser.parse_args()

    settings = Settings.from_env()
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.heuristic:
        overrides["strategy"] = STRATEGY_HEURISTIC
    settings = dataclasses.replace(settings, **overrides)

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; coach routes will answer 500")

    logger.info(
        "Starting coach server on %s:%d (strategy=%s)",
        settings.host,
        settings.port,
        settings.strategy,
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
