# report_filter/utils/__init__.py

from .logging_config import setup_logging, get_logger, get_performance_logger, PerformanceTimer
from .result_cache import ResultCache, MatchOutcome

__all__ = [
    'setup_logging',
    'get_logger',
    'get_performance_logger',
    'PerformanceTimer',
    'ResultCache',
    'MatchOutcome',
]
