"""Run the NEWS score API with Uvicorn."""
from __future__ import annotations

import argparse

import uvicorn

from .api.core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Start the NEWS score API")
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()
    uvicorn.run(
        "newsscore.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
