# report_filter/config/__init__.py

from .filter_config import (
    FilterConfig,
    PerformanceConfig,
    LoggingConfig,
    DEFAULT_CACHE_SIZE,
    TESTING_CONFIG,
    PRODUCTION_CONFIG,
)

__all__ = [
    'FilterConfig',
    'PerformanceConfig',
    'LoggingConfig',
    'DEFAULT_CACHE_SIZE',
    'TESTING_CONFIG',
    'PRODUCTION_CONFIG',
]
