"""
Summary Analyzer Module
-----------------------
Descriptive statistics over PEIRS score results.
Quantiles use linear interpolation between order statistics (numpy/pandas
"linear", R type 7); the standard deviation is the sample SD (ddof=1).
"""
import logging
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ..errors import SchemaError
from ..results import NUMERIC_SCORE_COLUMNS, STATISTICS, DescriptiveStats, ScoreResult
from ..utils.logging_utils import default_logger


def describe_series(values: pd.Series) -> Dict[str, float]:
    """Statistics over the non-missing entries of ``values``; all NaN except n when none remain."""
    x = pd.to_numeric(values, errors='coerce').dropna().astype(np.float64)
    if x.empty:
        return {'n': 0, **{stat: np.nan for stat in STATISTICS if stat != 'n'}}
    return {
        'n': int(x.size),
        'mean': float(x.mean()),
        'sd': float(x.std(ddof=1)),
        'min': float(x.min()),
        'q25': float(x.quantile(0.25, interpolation='linear')),
        'median': float(x.median()),
        'q75': float(x.quantile(0.75, interpolation='linear')),
        'max': float(x.max()),
    }


class PEIRSSummarizer:
    """
    Summarizes a ScoreResult.
    - Requires a ScoreResult carrying raw_total, items_answered and standardized.
    - Returns DescriptiveStats: one row per variable, one column per statistic.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("PEIRSSummarizer initialized.")

    def summarize(self, result: Any) -> DescriptiveStats:
        if not isinstance(result, ScoreResult):
            self.logger.error(f"PEIRSSummarizer: Expected a ScoreResult, got {type(result).__name__}.")
            raise SchemaError(f"summarize expects a ScoreResult, got {type(result).__name__}.")

        missing_columns = [col for col in NUMERIC_SCORE_COLUMNS if col not in result.scores.columns]
        if missing_columns:
            msg = f"Score result lacks expected columns: {', '.join(missing_columns)}"
            self.logger.error(f"PEIRSSummarizer: {msg}")
            raise SchemaError(msg, missing_columns=missing_columns)

        rows = {col: describe_series(result.scores[col]) for col in NUMERIC_SCORE_COLUMNS}
        table = pd.DataFrame.from_dict(rows, orient='index', columns=list(STATISTICS))
        table['n'] = table['n'].astype(np.int64)
        table.index.name = 'variable'

        self.logger.info(f"PEIRSSummarizer: Summarized {len(result.scores)} row(s) across {len(table)} variables.")
        return DescriptiveStats(
            table=table,
            n_items_requested=len(result.items_requested),
            n_items_used=len(result.items_used),
            n_items_missing=len(result.items_missing),
        )


def summarize(result: ScoreResult, logger: Optional[logging.Logger] = None) -> DescriptiveStats:
    """Descriptive statistics for a ScoreResult. See :class:`PEIRSSummarizer`."""
    return PEIRSSummarizer(logger or default_logger()).summarize(result)
