# report_filter/config/filter_config.py
"""
Configuration for request filters.

Values come from defaults, predefined profiles or ``REPORT_FILTER_*``
environment variables. Rule-level settings (type code, pattern, exclude,
cache size) are handed to each filter by the merge-rule layer; this module
only carries the process-wide defaults.
"""

import os
from dataclasses import dataclass, field

DEFAULT_CACHE_SIZE = 100


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")


@dataclass
class PerformanceConfig:
    """Caching and compilation settings."""
    enable_caching: bool = True
    default_cache_size: int = DEFAULT_CACHE_SIZE
    # expected number of distinct patterns, informational only
    automaton_table_hint: int = 300

    def validate(self) -> None:
        if self.default_cache_size < 0:
            raise ValueError(f"default_cache_size must be >= 0, got {self.default_cache_size}")
        if self.automaton_table_hint < 0:
            raise ValueError(f"automaton_table_hint must be >= 0, got {self.automaton_table_hint}")

    @property
    def effective_cache_size(self) -> int:
        """Cache size a filter gets when its rule does not set one."""
        return self.default_cache_size if self.enable_caching else 0


@dataclass
class LoggingConfig:
    """Logging settings."""
    log_level: str = "WARNING"
    enable_performance: bool = False


@dataclass
class FilterConfig:
    """Top-level configuration for the report filter package."""
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'FilterConfig':
        """
        Build a configuration from environment variables.

        Recognized variables:
            REPORT_FILTER_ENABLE_CACHING: true/false
            REPORT_FILTER_CACHE_SIZE: default per-filter cache capacity
            REPORT_FILTER_AUTOMATON_TABLE_HINT: expected distinct patterns
            REPORT_FILTER_LOG_LEVEL: logging level name
            REPORT_FILTER_ENABLE_PERFORMANCE_LOGGING: true/false

        Raises:
            ValueError: If a numeric variable cannot be parsed or is negative
        """
        performance = PerformanceConfig(
            enable_caching=_env_bool('REPORT_FILTER_ENABLE_CACHING', True),
            default_cache_size=_env_int('REPORT_FILTER_CACHE_SIZE', DEFAULT_CACHE_SIZE),
            automaton_table_hint=_env_int('REPORT_FILTER_AUTOMATON_TABLE_HINT', 300),
        )
        performance.validate()

        logging_config = LoggingConfig(
            log_level=os.getenv('REPORT_FILTER_LOG_LEVEL', 'WARNING').upper(),
            enable_performance=_env_bool('REPORT_FILTER_ENABLE_PERFORMANCE_LOGGING', False),
        )
        return cls(performance=performance, logging=logging_config)


TESTING_CONFIG = FilterConfig(
    performance=PerformanceConfig(enable_caching=True, default_cache_size=10),
    logging=LoggingConfig(log_level="DEBUG", enable_performance=True),
)

PRODUCTION_CONFIG = FilterConfig(
    performance=PerformanceConfig(enable_caching=True, default_cache_size=DEFAULT_CACHE_SIZE),
    logging=LoggingConfig(log_level="WARNING", enable_performance=False),
)
