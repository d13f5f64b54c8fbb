"""Process entry point: `python -m userdocs` or the `userdocs` console script."""

import uvicorn

from userdocs.config import Settings, get_settings
from userdocs.main import create_app


def run(settings: Settings | None = None) -> None:
    """Serve the API on the configured host and port."""
    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
