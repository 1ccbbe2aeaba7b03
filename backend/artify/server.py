"""Server Entry Point — runs the API under uvicorn with host/port from settings.

Usage:
    artify-api            # console script installed by the package
    python -m artify.server
"""

import uvicorn

from artify.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "artify.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
