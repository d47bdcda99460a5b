"""Start the tic-tac-toe API server: python -m web"""

import logging

import uvicorn

from web.config import settings

_log = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    _log.info("Starting Tic-Tac-Toe AI server on http://%s:%d", settings.host, settings.port)
    _log.info("Send POST requests to /play")
    uvicorn.run(
        "web.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
