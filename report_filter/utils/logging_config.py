# report_filter/utils/logging_config.py

import logging
import logging.config
import os
import time
from typing import Optional

def setup_logging(
    log_level: str = "WARNING",
    enable_console: bool = True,
    enable_performance: bool = False
) -> None:
    """
    Set up logging configuration for the report filter package.

    Only the ``report_filter`` logger namespace is configured; the root logger
    and the loggers of the host application are left alone. All output goes
    to stderr, nothing is written to files.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging
        enable_performance: Whether to emit timing output of the performance logger
    """

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(levelname)s - %(name)s - %(message)s'
            },
            'performance': {
                'format': '%(asctime)s - PERF - %(name)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {},
        'loggers': {
            'report_filter': {
                'level': log_level,
                'handlers': [],
                'propagate': True
            },
            'report_filter.performance': {
                'level': 'DEBUG' if enable_performance else 'WARNING',
                'handlers': [],
                'propagate': False
            }
        }
    }

    if enable_console:
        config['handlers']['console'] = {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
        config['loggers']['report_filter']['handlers'].append('console')
        config['loggers']['report_filter']['propagate'] = False

    if enable_performance:
        config['handlers']['performance'] = {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'performance',
            'stream': 'ext://sys.stderr'
        }
        config['loggers']['report_filter.performance']['handlers'].append('performance')

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == 'report_filter' or name.startswith('report_filter.'):
        return logging.getLogger(name)
    return logging.getLogger(f"report_filter.{name}")


def get_performance_logger() -> logging.Logger:
    """
    Get a logger instance for performance metrics.

    Returns:
        Performance logger instance
    """
    return logging.getLogger("report_filter.performance")


class PerformanceTimer:
    """Context manager for timing operations and logging performance metrics."""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None):
        self.operation_name = operation_name
        self.logger = logger or get_performance_logger()
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(f"{self.operation_name} completed in {self.duration:.4f}s")
        else:
            self.logger.warning(f"{self.operation_name} failed after {self.duration:.4f}s: {exc_val}")


def init_default_logging():
    """Initialize default logging configuration if not already set up."""
    if not logging.getLogger('report_filter').handlers:
        log_level = os.getenv('REPORT_FILTER_LOG_LEVEL', 'WARNING').upper()
        enable_perf = os.getenv('REPORT_FILTER_ENABLE_PERFORMANCE_LOGGING', 'false').lower() == 'true'

        setup_logging(
            log_level=log_level,
            enable_console=True,
            enable_performance=enable_perf
        )
