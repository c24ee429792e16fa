"""Command line entry for the hotel API."""

from __future__ import annotations

import uvicorn

from hotel.api.main import app
from hotel.core.config import settings


def run_server() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
