"""File logging for cricmirror runs."""

import logging
from datetime import datetime
from pathlib import Path

from cricmirror.utils.files import get_logs_path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Per-connection chatter from requests' transport
NOISY_LOGGERS = ('urllib3', 'charset_normalizer')


def setup_local_logging(level: str = 'DEBUG', logs_dir: Path | None = None) -> Path:
    """Write this run's log records to a timestamped file.

    The root logger gets a file handler under .cricmirror/logs/ (or
    logs_dir). Console output stays with rich, so no stream handler is
    added.

    Args:
        level: Logging level name, or 'ALL' for everything. Defaults to 'DEBUG'.
        logs_dir: Directory for the log file. Defaults to .cricmirror/logs in the project root.

    Returns:
        Path: The path to the created log file.

    """
    logs_dir = logs_dir or get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f'run_{datetime.now():%Y%m%d_%H%M%S}.log'

    level_name = level.upper()
    numeric_level = logging.NOTSET if level_name == 'ALL' else getattr(logging, level_name, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return log_file
