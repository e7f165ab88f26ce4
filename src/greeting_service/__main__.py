"""
Process entry point: configure logging and serve the app with uvicorn.
"""
import logging
import sys
from typing import Optional, Sequence

import uvicorn

from greeting_service.app import app

HOST = "0.0.0.0"
PORT = 8000

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the HTTP listener and block until it stops.

    Command-line arguments are accepted but not interpreted.
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger.info("Starting greeting service on %s:%d", HOST, PORT)

    uvicorn.run(app, host=HOST, port=PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
