import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "text_analyzer.log"


def setup_logging(log_dir: Union[str, Path] = "logs", level: Optional[str] = None):
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # File handler (rotating)
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=5
    )
    file_handler.setFormatter(formatter)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
