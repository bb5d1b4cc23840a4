"""cwaweather server entrypoint — wires everything together."""

import logging

import uvicorn

from cwaweather.app import create_app
from cwaweather.config import Settings

logger = logging.getLogger(__name__)


def main():
    settings = Settings()
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=settings.log_level.upper(),
    )
    logger.info("Starting cwaweather server (port=%s, environment=%s)", settings.port, settings.environment)

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
