"""
Results Module
--------------
Typed result structures passed between the scoring stages.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import pandas as pd

from .reporters.summary_reporter import render_summary

SCORE_COLUMNS = ('raw_total', 'items_answered', 'standardized', 'response_status')
NUMERIC_SCORE_COLUMNS = ('raw_total', 'items_answered', 'standardized')
STATISTICS = ('n', 'mean', 'sd', 'min', 'q25', 'median', 'q75', 'max')

STATUS_VALID = 'Valid'
STATUS_TOO_FEW = 'Too few items'
RESPONSE_STATUSES = (STATUS_VALID, STATUS_TOO_FEW)


@dataclass(frozen=True, eq=False)
class ScoreResult:
    """
    Per-respondent PEIRS scores plus the metadata describing how they were made.

    ``scores`` has one row per input row (same index, same order) and the
    columns ``raw_total``, ``items_answered``, ``standardized`` and
    ``response_status``. The metadata is also mirrored into ``scores.attrs``.
    """
    scores: pd.DataFrame
    items_requested: Tuple[str, ...]
    items_used: Tuple[str, ...]
    items_missing: Tuple[str, ...]
    scale_from: Tuple[float, float]
    scale_to: Tuple[float, float]

    def __len__(self) -> int:
        return len(self.scores)

    @property
    def metadata(self) -> Dict[str, Any]:
        return {
            'items_requested': list(self.items_requested),
            'items_used': list(self.items_used),
            'items_missing': list(self.items_missing),
            'scale_from': self.scale_from,
            'scale_to': self.scale_to,
        }

    @property
    def n_valid(self) -> int:
        if 'response_status' not in self.scores.columns:
            return 0
        return int((self.scores['response_status'] == STATUS_VALID).sum())


@dataclass(frozen=True, eq=False)
class DescriptiveStats:
    """
    Descriptive statistics over a ScoreResult.

    ``table`` has one row per variable (raw_total, items_answered,
    standardized) and one column per statistic (n, mean, sd, min, q25,
    median, q75, max).
    """
    table: pd.DataFrame
    n_items_requested: int
    n_items_used: int
    n_items_missing: int

    def render(self, decimals: int = 2) -> str:
        return render_summary(self, decimals=decimals)

    def __str__(self) -> str:
        return self.render()
