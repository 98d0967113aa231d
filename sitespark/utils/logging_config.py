"""
Centralised logging configuration for SiteSpark
All modules log through children of the 'sitespark' logger
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import ConfigurationError

PACKAGE_LOGGER = 'sitespark'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
STEP_RULE_WIDTH = 20


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Configure the package logger from the 'logging' config section

    Console output is always enabled; a rotating log file is added when
    'log_to_file' is set. Calling this again replaces earlier handlers.

    Args:
        config: Logging configuration dictionary

    Returns:
        The configured 'sitespark' logger

    Raises:
        ConfigurationError: If the level is not a standard logging level
    """
    level = _resolve_level(config.get('level', 'INFO'))
    formatter = logging.Formatter(config.get('format', DEFAULT_LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(_configure_handler(logging.StreamHandler(), level, formatter))

    if config.get('log_to_file', False):
        file_handler = _create_file_handler(config)
        if file_handler is not None:
            logger.addHandler(_configure_handler(file_handler, level, formatter))
            logger.info(f"Logging to file: {file_handler.baseFilename}")

    logger.propagate = False
    return logger


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown logging level: {level}")
    return resolved


def _configure_handler(handler: logging.Handler, level: int,
                       formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _create_file_handler(config: Dict[str, Any]) -> Optional[logging.Handler]:
    """Rotating file handler, or None when the log directory cannot be created"""
    log_path = Path(config.get('log_file_path', 'logs/sitespark.log'))
    max_bytes = int(config.get('max_file_size_mb', 10)) * 1024 * 1024

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=int(config.get('backup_count', 5)),
            encoding='utf-8'
        )
    except OSError as e:
        logging.getLogger(PACKAGE_LOGGER).warning(f"File logging disabled, cannot open {log_path}: {e}")
        return None


def get_logger(name: str = None) -> logging.Logger:
    """
    Get the logger for a module

    Args:
        name: Dotted module name below 'sitespark' (optional)

    Returns:
        'sitespark.<name>' logger, or the package logger when name is empty
    """
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}' if name else PACKAGE_LOGGER)


def log_processing_step(logger: logging.Logger, step_name: str, details: str = None) -> None:
    """Log a banner marking the start of a pipeline step"""
    rule = "=" * STEP_RULE_WIDTH
    logger.info(f"{rule} {step_name.upper()} {rule}")
    if details:
        logger.info(f"  {details}")


def log_validation_result(logger: logging.Logger, validation_name: str,
                          passed: bool, details: str = None) -> None:
    """
    Log the outcome of a validation check

    Passing checks log at INFO, failing ones at ERROR.
    """
    message = f"Validation '{validation_name}': {'PASSED' if passed else 'FAILED'}"
    if details:
        message = f"{message} - {details}"

    logger.log(logging.INFO if passed else logging.ERROR, message)


def log_performance_metric(logger: logging.Logger, operation: str,
                           duration_seconds: float, products_rendered: int = None) -> None:
    """
    Log timing for an operation

    Args:
        logger: Logger instance
        operation: Name of operation
        duration_seconds: Duration in seconds
        products_rendered: Number of products rendered (optional)
    """
    message = f"Performance - {operation}: {duration_seconds:.2f}s"

    if products_rendered is not None:
        message += f" ({products_rendered:,} products)"

    logger.info(message)
