"""
Concrete request filters, one per merge-rule type code.

Each filter examines a single attribute of a ``RequestData`` record. Response
codes are compared in their decimal text form, so ``"5\\d\\d"`` selects server
errors.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Type

import pandas as pd

from report_filter.config.filter_config import DEFAULT_CACHE_SIZE, FilterConfig
from report_filter.matcher.automaton import AutomatonTable
from report_filter.matcher.errors import UnknownFilterTypeError
from report_filter.matcher.request_filter import RequestFilter


@dataclass(frozen=True)
class RequestData:
    """Recorded request as seen by the merge rules."""
    name: str = ''
    url: str = ''
    content_type: Optional[str] = None
    response_code: Optional[int] = None
    http_method: str = ''
    transaction_name: str = ''
    agent_name: str = ''

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> 'RequestData':
        """Build a record from a dict or DataFrame row, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key in known:
            if key not in row:
                continue
            value = row[key]
            # missing cells arrive as NaN, NaT or pd.NA depending on the dtype
            if pd.api.types.is_scalar(value) and pd.isna(value):
                value = None
            values[key] = value
        if values.get('response_code') is not None:
            values['response_code'] = int(values['response_code'])
        return cls(**values)


class FieldFilter(RequestFilter):
    """Request filter reading the attribute named by ``FIELD``."""

    TYPE_CODE: str = ''
    FIELD: str = ''

    def __init__(self, regex: Optional[str], exclude: bool = False,
                 cache_size: int = DEFAULT_CACHE_SIZE,
                 automaton_table: Optional[AutomatonTable] = None):
        super().__init__(self.TYPE_CODE, regex, exclude, cache_size, automaton_table)

    def get_text(self, record: RequestData) -> str:
        value = getattr(record, self.FIELD)
        return '' if value is None else str(value)


class RequestNameFilter(FieldFilter):
    TYPE_CODE = 'n'
    FIELD = 'name'


class UrlFilter(FieldFilter):
    TYPE_CODE = 'u'
    FIELD = 'url'


class ContentTypeFilter(FieldFilter):
    TYPE_CODE = 'c'
    FIELD = 'content_type'


class StatusCodeFilter(FieldFilter):
    TYPE_CODE = 's'
    FIELD = 'response_code'


class HttpMethodFilter(FieldFilter):
    TYPE_CODE = 'm'
    FIELD = 'http_method'


class TransactionNameFilter(FieldFilter):
    TYPE_CODE = 't'
    FIELD = 'transaction_name'


class AgentNameFilter(FieldFilter):
    TYPE_CODE = 'a'
    FIELD = 'agent_name'


class TextFilter(RequestFilter):
    """Filter whose records are the subject texts themselves."""

    def get_text(self, record: Any) -> str:
        return '' if record is None else str(record)


FILTER_TYPES: Dict[str, Type[FieldFilter]] = {
    cls.TYPE_CODE: cls
    for cls in (
        RequestNameFilter,
        UrlFilter,
        ContentTypeFilter,
        StatusCodeFilter,
        HttpMethodFilter,
        TransactionNameFilter,
        AgentNameFilter,
    )
}


def create_filter(type_code: str, regex: Optional[str], exclude: bool = False,
                  cache_size: Optional[int] = None,
                  config: Optional[FilterConfig] = None,
                  automaton_table: Optional[AutomatonTable] = None) -> FieldFilter:
    """
    Build the request filter registered for ``type_code``.

    Args:
        type_code: One of the codes in ``FILTER_TYPES``
        regex: Pattern of the rule, may be blank
        exclude: Whether the rule excludes matching requests
        cache_size: Result cache capacity; None takes the configured default
        config: Process configuration, read from the environment if omitted
        automaton_table: Optional table override, mainly for tests

    Raises:
        UnknownFilterTypeError: If no filter is registered for ``type_code``
        InvalidPatternError: If the pattern does not compile
    """
    filter_class = FILTER_TYPES.get(type_code)
    if filter_class is None:
        raise UnknownFilterTypeError(type_code, FILTER_TYPES)

    if cache_size is None:
        config = config or FilterConfig.from_env()
        cache_size = config.performance.effective_cache_size

    return filter_class(regex, exclude=exclude, cache_size=cache_size,
                        automaton_table=automaton_table)
