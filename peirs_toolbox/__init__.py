"""
PEIRS Scoring Toolbox
---------------------
Scores the Patients Engaged in Research Scale (PEIRS) and summarizes the scores.

    >>> from peirs_toolbox import score, summarize
    >>> result = score(df)
    >>> print(summarize(result))
"""
from .analyzers.score_analyzer import PEIRSScorer, score
from .analyzers.summary_analyzer import PEIRSSummarizer, summarize
from .config import ScoringConfig
from .errors import ConfigurationError, DataError, MissingItemsWarning, PEIRSError, SchemaError
from .items import DEFAULT_ITEMS, PEIRS_SUBSCALES, peirs_items
from .processors.rescale_processor import linear_rescale
from .reporters.summary_reporter import SummaryReporter
from .results import DescriptiveStats, ScoreResult
from .utils.logging_utils import setup_logging

__all__ = [
    'ConfigurationError', 'DataError', 'DEFAULT_ITEMS', 'DescriptiveStats', 'MissingItemsWarning',
    'PEIRSError', 'PEIRSScorer', 'PEIRSSummarizer', 'PEIRS_SUBSCALES', 'SchemaError', 'ScoreResult',
    'ScoringConfig', 'SummaryReporter', 'linear_rescale', 'peirs_items', 'score', 'setup_logging',
    'summarize',
]
