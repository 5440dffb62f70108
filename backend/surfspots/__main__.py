"""Entry point for running the service with `python -m surfspots`."""

import uvicorn

from surfspots.config import settings


def main():
    """Run the FastAPI application on the configured host and port."""
    uvicorn.run(
        "surfspots.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
