# report_filter/executor/__init__.py

from .classify import classify_requests, summarize_labels

__all__ = [
    'classify_requests',
    'summarize_labels',
]
