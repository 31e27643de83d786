"""
Score Analyzer Module
--------------------
Computes PEIRS scores for each respondent of a questionnaire table.
Config-driven: item list, answered-items threshold, source/target ranges, strictness.
"""
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..config import ScoringConfig
from ..errors import DataError
from ..preprocessors.item_preprocessor import ItemPreprocessor
from ..processors.rescale_processor import RescaleProcessor
from ..results import RESPONSE_STATUSES, STATUS_TOO_FEW, STATUS_VALID, ScoreResult
from ..utils.logging_utils import default_logger


class PEIRSScorer:
    """
    Computes PEIRS scores from respondent data.
    - Accepts a ScoringConfig or a config dict with the same keys.
    - Returns a ScoreResult: per-row raw total, items answered,
      standardized 0-100 score and response status, plus item metadata.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.item_preprocessor = ItemPreprocessor(logger)
        self.rescale_processor = RescaleProcessor(logger)
        self.logger.info("PEIRSScorer initialized.")

    def score(self, data: Any, config: Union[ScoringConfig, Dict[str, Any], None] = None,
              stacklevel: int = 1) -> ScoreResult:
        """
        Scores every row of ``data``.

        Args:
            data: Respondent table; a DataFrame or row records accepted by ``pd.DataFrame``.
            config: ScoringConfig or dict of scoring options; defaults apply when omitted.
            stacklevel: Frame the MissingItemsWarning points at, counted from this call (1 = the caller).

        Returns:
            ScoreResult with one scored row per input row, in input order.

        Raises:
            ConfigurationError: malformed config.
            DataError: data is not tabular, no requested item is present, or
                items are missing while ``strict`` is set.
        """
        if not isinstance(config, ScoringConfig):
            config = ScoringConfig.from_dict(config)
        data = self._as_frame(data)
        self.logger.info(f"PEIRSScorer: Scoring {len(data)} row(s) with {len(config.items)} requested item(s).")

        resolution = self.item_preprocessor.resolve_items(data, config.items, strict=config.strict,
                                                          stacklevel=stacklevel + 1)
        item_df = self.item_preprocessor.extract_items(data, resolution.items_used)
        rescaled = self.rescale_processor.rescale(item_df, config.scale_from, config.scale_to)
        scores = self._aggregate(rescaled, config)

        result = ScoreResult(
            scores=scores,
            items_requested=tuple(resolution.items_requested),
            items_used=tuple(resolution.items_used),
            items_missing=tuple(resolution.items_missing),
            scale_from=config.scale_from,
            scale_to=config.scale_to,
        )
        scores.attrs.update(result.metadata)
        self.logger.info(f"PEIRSScorer: Scored {len(scores)} row(s); {result.n_valid} valid.")
        return result

    def _as_frame(self, data: Any) -> pd.DataFrame:
        if isinstance(data, pd.DataFrame):
            return data
        if isinstance(data, (list, tuple, Mapping)):
            try:
                return pd.DataFrame(data)
            except (TypeError, ValueError) as e:
                self.logger.error(f"PEIRSScorer: Could not build a table from input: {e}")
                raise DataError(f"data must be tabular: {e}") from e
        self.logger.error(f"PEIRSScorer: Input of type {type(data).__name__} is not tabular.")
        raise DataError(f"data must be tabular (a pandas DataFrame or row records), got {type(data).__name__}.")

    def _aggregate(self, rescaled: pd.DataFrame, config: ScoringConfig) -> pd.DataFrame:
        values = rescaled.to_numpy(dtype=np.float64)
        answered_mask = ~np.isnan(values)

        raw_total = np.where(answered_mask, values, 0.0).sum(axis=1)
        items_answered = answered_mask.sum(axis=1).astype(np.int64)
        denom = items_answered * config.span_to
        with np.errstate(divide='ignore', invalid='ignore'):
            standardized = np.where(items_answered > 0, raw_total / denom * 100.0, np.nan)
        status = np.where(items_answered < config.min_items_required, STATUS_TOO_FEW, STATUS_VALID)

        n_unanswered = int((items_answered == 0).sum())
        if n_unanswered:
            self.logger.warning(f"PEIRSScorer: {n_unanswered} row(s) answered no items; standardized score left missing.")

        return pd.DataFrame({
            'raw_total': raw_total,
            'items_answered': items_answered,
            'standardized': standardized,
            'response_status': pd.Categorical(status, categories=list(RESPONSE_STATUSES)),
        }, index=rescaled.index)


def score(data: Any,
          items: Optional[Iterable[str]] = None,
          min_items_required: int = 10,
          scale_from: Sequence[float] = (1, 5),
          scale_to: Sequence[float] = (0, 4),
          strict: bool = True,
          logger: Optional[logging.Logger] = None) -> ScoreResult:
    """
    Scores PEIRS responses with call-time options. See :class:`PEIRSScorer`.
    ``items=None`` scores the 27 default PEIRS items.
    """
    config = ScoringConfig.from_dict({
        'items': items,
        'min_items_required': min_items_required,
        'scale_from': scale_from,
        'scale_to': scale_to,
        'strict': strict,
    })
    return PEIRSScorer(logger or default_logger()).score(data, config, stacklevel=2)
