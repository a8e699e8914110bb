import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name, log_dir: Union[str, Path] = 'logs', level=logging.INFO, console=False):
    """
    Configure logging for the given service.

    Layout:
    logs/
        {service_name}.log   - current log, rotated at 10 MB, 5 backups

    The ``business`` logger gets the same handlers as the service logger and stops
    propagating, so records from ``business.*`` modules land in the same file
    without passing through the root logger.

    :param service_name: Service name (string)
    :param log_dir: Directory for the log files
    :param level: Logging level for the handlers
    :param console: Also write records to stderr
    :return: Logger for the service
    """
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)
    current_log_path = logs_dir / f'{service_name}.log'

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(current_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(level)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Drop handlers left over from a previous call
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    logger.addHandler(service_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    # Component loggers (business.*) report through the same handlers
    component_logger = logging.getLogger('business')
    component_logger.setLevel(level)
    component_logger.handlers = list(logger.handlers)
    component_logger.propagate = False

    return logger


def get_recent_history(service_name, lines=50, log_dir: Union[str, Path] = 'logs') -> List[str]:
    """
    Return the last lines of the current log of a service.

    :param service_name: Service name
    :param lines: Number of lines to return
    :param log_dir: Directory for the log files
    :return: List of lines, or a single message if the file is missing
    """
    file_path = Path(log_dir) / f'{service_name}.log'

    if not file_path.exists():
        return [f"File not found: {file_path}"]

    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.readlines()

    return content[-lines:] if len(content) > lines else content
