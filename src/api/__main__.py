"""
Contactbook web server.
Run: python -m api (from repo root, with .env or env vars set).
"""

import uvicorn

from api.config import Settings
from api.main import app, logger


def main() -> None:
    settings = Settings.from_env()
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
