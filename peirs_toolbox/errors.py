"""
Errors Module
-------------
Exception and warning types raised by the PEIRS scoring stages.
"""
from typing import Iterable, Optional


class PEIRSError(ValueError):
    """Base class for all PEIRS scoring errors."""


class ConfigurationError(PEIRSError):
    """Malformed scoring configuration (scale ranges, threshold, item list)."""


class DataError(PEIRSError):
    """
    The dataset cannot be scored: no requested item is present, or
    (in strict mode) some requested items are absent.
    """
    def __init__(self, message: str, missing_items: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.missing_items = list(missing_items) if missing_items is not None else []


class SchemaError(PEIRSError):
    """The summarizer was handed something that is not a complete score result."""
    def __init__(self, message: str, missing_columns: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.missing_columns = list(missing_columns) if missing_columns is not None else []


class MissingItemsWarning(UserWarning):
    """Requested items were absent from the dataset and scoring continued without them."""
