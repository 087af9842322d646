# report_filter/executor/classify.py

from typing import List, Optional

import numpy as np
import pandas as pd

from report_filter.matcher.request_filter import NO_REPLACEMENT, RequestFilter
from report_filter.matcher.request_filters import RequestData
from report_filter.utils.logging_config import get_logger, PerformanceTimer

# Module logger
logger = get_logger(__name__)


def classify_requests(df: pd.DataFrame, request_filter: RequestFilter,
                      group_index: int = NO_REPLACEMENT) -> pd.DataFrame:
    """
    Run a request filter over every row of a DataFrame of recorded requests.

    Rows are converted with ``RequestData.from_mapping``, so column names must
    match the record attributes; other columns are carried along untouched.

    Args:
        df: Recorded requests, one per row
        request_filter: Filter to evaluate; must not be used by another worker
            at the same time
        group_index: Capturing group providing the label, -1 for the subject text

    Returns:
        A copy of ``df`` with an ``applies`` boolean column and a ``label``
        column (None for rows the filter does not apply to)

    Raises:
        CaptureGroupOutOfRange: If ``group_index`` does not exist in the pattern
    """
    row_count = len(df)
    applies = np.zeros(row_count, dtype=bool)
    labels: List[Optional[str]] = [None] * row_count

    with PerformanceTimer(f"classify {row_count} rows with {request_filter}"):
        for position, row in enumerate(df.to_dict('records')):
            record = RequestData.from_mapping(row)
            state = request_filter.applies_to(record)
            if state is None:
                continue
            applies[position] = True
            try:
                labels[position] = request_filter.get_replacement_text(record, group_index, state)
            except IndexError:
                logger.error("Cannot label row %d with filter %s", position, request_filter)
                raise

    result = df.copy()
    result['applies'] = applies
    result['label'] = pd.Series(labels, index=df.index, dtype=object)

    cache_stats = request_filter.cache_stats()
    if cache_stats is not None:
        logger.debug("Cache after classification: %s", cache_stats)
    return result


def summarize_labels(classified: pd.DataFrame) -> pd.Series:
    """
    Count applying rows per label.

    Args:
        classified: Output of ``classify_requests``

    Returns:
        Series indexed by label, sorted by descending count
    """
    if classified.empty:
        return pd.Series(dtype='int64', name='count')

    matching = classified.loc[classified['applies'], 'label']
    counts = matching.value_counts(dropna=False)
    counts.name = 'count'
    return counts
