"""Logging setup"""

import logging
import sys
from pathlib import Path
from typing import Optional

from btce.config.models import LoggingConfig


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(config: Optional[LoggingConfig] = None, log_to_file: bool = True) -> logging.Logger:
    """
    Configure the ``btce`` logger hierarchy.

    Args:
        config: LoggingConfig instance (if None, uses defaults)
        log_to_file: Also write to ``log_dir/log_file``

    Returns:
        Logger instance
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.log_level)

    logger = logging.getLogger("btce")
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / config.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
