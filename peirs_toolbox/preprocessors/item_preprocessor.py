"""
Item Preprocessor Module
------------------------
Resolves the requested PEIRS items against a dataset and extracts them
as a purely numeric item matrix.
"""
import logging
import warnings
from typing import List, NamedTuple, Sequence

import numpy as np
import pandas as pd

from ..errors import DataError, MissingItemsWarning


class ItemResolution(NamedTuple):
    items_requested: List[str]
    items_used: List[str]
    items_missing: List[str]


class ItemPreprocessor:
    """
    Selects item columns from a respondent table and coerces them to numbers.
    - Requested items absent from the data are fatal in strict mode and a
      MissingItemsWarning otherwise.
    - Values that cannot be parsed as numbers become NaN; this is never an error.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("ItemPreprocessor initialized.")

    def resolve_items(self, data: pd.DataFrame, items: Sequence[str], strict: bool = True,
                      stacklevel: int = 1) -> ItemResolution:
        """
        Splits the requested items into those present in ``data`` and those missing.
        Both lists keep the order of ``items``. ``stacklevel`` counts frames above
        this call that the MissingItemsWarning is attributed to (1 = the caller).

        Raises:
            DataError: if items are missing and ``strict`` is True, or if no
                requested item is present at all.
        """
        columns = set(data.columns)
        items_requested = list(items)
        items_used = [item for item in items_requested if item in columns]
        items_missing = [item for item in items_requested if item not in columns]

        if items_missing:
            msg = f"Missing items: {', '.join(items_missing)}"
            if strict:
                self.logger.error(f"ItemPreprocessor: {msg}")
                raise DataError(msg, missing_items=items_missing)
            self.logger.warning(f"ItemPreprocessor: {msg}. Scoring continues with {len(items_used)} item(s).")
            warnings.warn(msg, MissingItemsWarning, stacklevel=stacklevel + 1)

        if not items_used:
            msg = "None of the requested items are present in the data."
            self.logger.error(f"ItemPreprocessor: {msg}")
            raise DataError(msg, missing_items=items_missing)

        duplicated = sorted({col for col in data.columns[data.columns.duplicated()] if col in items_used})
        if duplicated:
            msg = f"Item columns appear more than once in the data: {', '.join(duplicated)}"
            self.logger.error(f"ItemPreprocessor: {msg}")
            raise DataError(msg)

        self.logger.debug(f"ItemPreprocessor: Using {len(items_used)}/{len(items_requested)} requested items.")
        return ItemResolution(items_requested, items_used, items_missing)

    def extract_items(self, data: pd.DataFrame, items_used: Sequence[str]) -> pd.DataFrame:
        """
        Returns a float64 copy of the ``items_used`` columns. Unparseable,
        empty and non-finite cells become NaN. ``data`` is left untouched.
        """
        numeric = {}
        for item in items_used:
            coerced = pd.to_numeric(data[item], errors='coerce')
            values = coerced.to_numpy(dtype='float64', na_value=np.nan, copy=True)
            values[~np.isfinite(values)] = np.nan
            numeric[item] = values
        item_df = pd.DataFrame(numeric, index=data.index, columns=list(items_used))

        n_coerced = int((item_df.isna() & data[list(items_used)].notna().to_numpy()).to_numpy().sum())
        if n_coerced:
            self.logger.debug(f"ItemPreprocessor: {n_coerced} non-numeric cell(s) treated as missing.")
        return item_df
