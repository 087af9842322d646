# report_filter/matcher/__init__.py

from .errors import (
    FilterError,
    InvalidPatternError,
    CaptureGroupOutOfRange,
    CaptureUnavailableError,
    UnknownFilterTypeError,
)
from .automaton import Automaton, AutomatonTable, compile_automaton, get_automaton_table
from .full_matcher import CaptureResult, FullMatcher, UNCAPTURED
from .request_filter import RequestFilter, NO_REPLACEMENT
from .request_filters import (
    RequestData,
    FieldFilter,
    RequestNameFilter,
    UrlFilter,
    ContentTypeFilter,
    StatusCodeFilter,
    HttpMethodFilter,
    TransactionNameFilter,
    AgentNameFilter,
    TextFilter,
    FILTER_TYPES,
    create_filter,
)

__all__ = [
    'FilterError',
    'InvalidPatternError',
    'CaptureGroupOutOfRange',
    'CaptureUnavailableError',
    'UnknownFilterTypeError',
    'Automaton',
    'AutomatonTable',
    'compile_automaton',
    'get_automaton_table',
    'CaptureResult',
    'FullMatcher',
    'UNCAPTURED',
    'RequestFilter',
    'NO_REPLACEMENT',
    'RequestData',
    'FieldFilter',
    'RequestNameFilter',
    'UrlFilter',
    'ContentTypeFilter',
    'StatusCodeFilter',
    'HttpMethodFilter',
    'TransactionNameFilter',
    'AgentNameFilter',
    'TextFilter',
    'FILTER_TYPES',
    'create_filter',
]
