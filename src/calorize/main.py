"""Command-line launcher for the local API server."""

import uvicorn

from calorize.api.app import create_app
from calorize.config import Settings
from calorize.containers import build_container


def main() -> None:
    """Build the app from settings and serve it with uvicorn."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
