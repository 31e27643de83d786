"""
Summary Reporter Module
----------------------
Renders PEIRS descriptive statistics as plain text.
"""
import logging
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from ..results import DescriptiveStats

SUMMARY_TITLE = "PEIRS Scoring Summary"


def render_summary(stats: 'DescriptiveStats', decimals: int = 2) -> str:
    header = (f"Items requested: {stats.n_items_requested} "
              f"| Items used: {stats.n_items_used} "
              f"| Missing: {stats.n_items_missing}")
    with pd.option_context('display.width', 120, 'display.max_columns', None):
        body = stats.table.round(decimals).to_string()
    return f"{SUMMARY_TITLE}\n{header}\n\n{body}\n"


class SummaryReporter:
    """
    Handles rendering of summary tables from PEIRS descriptive statistics.
    - Returns the text; writing it anywhere is left to the caller.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("SummaryReporter initialized.")

    def generate_summary(self, stats: 'DescriptiveStats', decimals: int = 2) -> str:
        self.logger.info("SummaryReporter: Rendering PEIRS summary.")
        return render_summary(stats, decimals=decimals)
