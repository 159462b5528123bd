"""
Notes API: Server Entry Point
===============================

Usage:
    python -m notes_api          # or the `notes-api` console script
    PORT=8080 python -m notes_api
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
