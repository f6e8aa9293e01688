#!/usr/bin/env python
"""Start the extractor API with the host, port and reload flag from config.yaml."""
import sys
from pathlib import Path

import uvicorn
from loguru import logger

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import Config
from lib.logging_setup import setup_logging


def main() -> None:
    config = Config()
    setup_logging(config)

    backend = config.get_backend_config()
    logger.info(f"Serving URL data extractor on {backend['host']}:{backend['port']}")
    uvicorn.run(
        "app.main:app",
        host=backend['host'],
        port=backend['port'],
        reload=backend['reload'],
        log_config=None,
    )


if __name__ == "__main__":
    main()
