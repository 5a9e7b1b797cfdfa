# core/logging_config.py

import logging
import sys

logger = logging.getLogger("word_upload")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once, at app creation."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    logger.setLevel(level.upper())
    # multipart parser logs every part at debug level
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
