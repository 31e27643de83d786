"""Rescale Processor - Linear map of item responses from one numeric range onto another.
Generic: y = c + (x - a) * (d - c) / (b - a). Missing values stay missing."""
import logging
from typing import Tuple, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from ..errors import ConfigurationError

Range = Tuple[float, float]


def linear_rescale(values: ArrayLike, scale_from: Range, scale_to: Range) -> NDArray[np.float64]:
    """Map ``values`` from ``scale_from`` onto ``scale_to``. NaN in, NaN out.
    Values outside ``scale_from`` are extrapolated, not clipped.
    The inverse map is ``linear_rescale(y, scale_to, scale_from)``."""
    a, b = scale_from
    c, d = scale_to
    if b == a:
        raise ConfigurationError(f"Cannot rescale from a zero-width range {scale_from}.")
    x = np.asarray(values, dtype=np.float64)
    return c + (x - a) * ((d - c) / (b - a))


class RescaleProcessor:
    """
    Rescales a numeric item matrix column by column.
    - Accepts the source and target ranges at call time.
    - Returns a new DataFrame with the same index and columns.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("RescaleProcessor initialized.")

    def rescale(self, item_df: pd.DataFrame, scale_from: Range, scale_to: Range) -> pd.DataFrame:
        rescaled = linear_rescale(item_df.to_numpy(dtype=np.float64), scale_from, scale_to)
        self.logger.debug(f"RescaleProcessor: Mapped {item_df.shape[1]} item(s) from {scale_from} to {scale_to}.")

        a, b = scale_from
        observed = item_df.to_numpy(dtype=np.float64)
        n_out_of_range = int(np.sum((observed < a) | (observed > b)))
        if n_out_of_range:
            self.logger.warning(f"RescaleProcessor: {n_out_of_range} response(s) outside {scale_from}; extrapolated linearly.")
        return pd.DataFrame(rescaled, index=item_df.index, columns=item_df.columns)

    def inverse(self, rescaled: Union[pd.DataFrame, ArrayLike], scale_from: Range, scale_to: Range):
        """Undo :meth:`rescale`, returning values on the ``scale_from`` range."""
        if isinstance(rescaled, pd.DataFrame):
            back = linear_rescale(rescaled.to_numpy(dtype=np.float64), scale_to, scale_from)
            return pd.DataFrame(back, index=rescaled.index, columns=rescaled.columns)
        return linear_rescale(rescaled, scale_to, scale_from)
