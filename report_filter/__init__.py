# report_filter/__init__.py
"""
Pattern-based request classification for performance-test reports.

Merge rules use request filters to decide which recorded requests belong to a
request category and to derive grouping labels from capturing groups.
"""

from .utils.logging_config import init_default_logging
from .matcher import *
from .executor import classify_requests, summarize_labels
from .config import FilterConfig

init_default_logging()

__all__ = matcher.__all__ + [
    'classify_requests',
    'summarize_labels',
    'FilterConfig',
]
