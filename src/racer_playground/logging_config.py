import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    for handler in logger.handlers:
        if (isinstance(handler, RotatingFileHandler) and
                handler.baseFilename == os.path.abspath(path)):
            return True
    return False


def setup_logging(
    service_name: str = "racer_playground",
    log_dir: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Configure logging for the given service.

    Directory layout:
    {log_dir}/
        {service_name}.log  - log of this service
        all.log             - log of every logger that propagates to root

    Calling it again for the same service replaces that service's handlers
    instead of stacking new ones.

    :param service_name: Logger name, normally the package name
    :param log_dir: Directory for the log files, 'logs' by default
    :param level: Level for the service logger and its handlers
    :return: The service logger
    """
    logs_dir = Path(log_dir) if log_dir is not None else Path('logs')
    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

    service_log_path = logs_dir / f'{service_name}.log'
    all_log_path = logs_dir / 'all.log'

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(service_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(service_handler)
    logger.addHandler(console_handler)

    root_logger = logging.getLogger()
    if not _has_file_handler(root_logger, all_log_path):
        all_handler = RotatingFileHandler(
            str(all_log_path),
            maxBytes=20*1024*1024,  # 20 MB, shared by every service
            backupCount=5,
            encoding='utf-8'
        )
        all_handler.setFormatter(formatter)
        all_handler.setLevel(logging.INFO)
        root_logger.addHandler(all_handler)

    return logger
