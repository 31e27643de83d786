"""
Scoring Config Module
---------------------
Validated, immutable scoring configuration.
Built from call-time keyword arguments or from a plain config dict.
"""
import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError
from .items import DEFAULT_ITEMS

Range = Tuple[float, float]


def _as_range(value: Any, name: str) -> Range:
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{name} must be a sequence of two numbers, got {value!r}.")
    if len(value) != 2:
        raise ConfigurationError(f"{name} must contain exactly two numbers, got {len(value)}.")
    bounds = []
    for bound in value:
        # bool is an int subclass; reject it explicitly
        if isinstance(bound, bool) or not isinstance(bound, numbers.Real) or not math.isfinite(bound):
            raise ConfigurationError(f"{name} must contain finite numbers, got {value!r}.")
        bounds.append(float(bound))
    return bounds[0], bounds[1]


@dataclass(frozen=True)
class ScoringConfig:
    """
    Scoring parameters.

    Attributes:
        items: Item columns to score, in order. Defaults to the 27 PEIRS items.
        min_items_required: Rows answering fewer items are flagged "Too few items".
        scale_from: Input response range (a, b), a < b.
        scale_to: Target range (c, d) the responses are linearly mapped onto.
        strict: If True, requested items absent from the data are fatal.
    """
    items: Tuple[str, ...] = DEFAULT_ITEMS
    min_items_required: int = 10
    scale_from: Range = (1.0, 5.0)
    scale_to: Range = (0.0, 4.0)
    strict: bool = True

    def __post_init__(self):
        scale_from = _as_range(self.scale_from, 'scale_from')
        scale_to = _as_range(self.scale_to, 'scale_to')
        if scale_from[1] <= scale_from[0]:
            raise ConfigurationError(f"scale_from must be increasing, e.g. (1, 5); got {scale_from}.")
        if scale_to[1] == scale_to[0]:
            raise ConfigurationError(f"scale_to must span a non-empty range; got {scale_to}.")

        if isinstance(self.items, str):
            raise ConfigurationError("items must be a sequence of item names, not a single string.")
        try:
            items = tuple(self.items)
        except TypeError:
            raise ConfigurationError(f"items must be a sequence of item names, got {self.items!r}.") from None
        if not items:
            raise ConfigurationError("items must name at least one item.")
        if not all(isinstance(item, str) for item in items):
            raise ConfigurationError("items must be strings.")
        duplicates = sorted({item for item in items if items.count(item) > 1})
        if duplicates:
            raise ConfigurationError(f"items must be distinct; duplicated: {', '.join(duplicates)}")

        threshold = self.min_items_required
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Integral) or threshold < 0:
            raise ConfigurationError(f"min_items_required must be a non-negative integer, got {threshold!r}.")
        if not isinstance(self.strict, bool):
            raise ConfigurationError(f"strict must be True or False, got {self.strict!r}.")

        # frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, 'items', items)
        object.__setattr__(self, 'min_items_required', int(threshold))
        object.__setattr__(self, 'scale_from', scale_from)
        object.__setattr__(self, 'scale_to', scale_to)

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> 'ScoringConfig':
        """
        Builds a config from a dict. Missing keys take their defaults;
        unknown keys are rejected. ``items: None`` means the default items.
        """
        config = dict(config or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ConfigurationError(f"Unknown scoring option(s): {', '.join(unknown)}")
        if config.get('items') is None:
            config.pop('items', None)
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items': list(self.items),
            'min_items_required': self.min_items_required,
            'scale_from': self.scale_from,
            'scale_to': self.scale_to,
            'strict': self.strict,
        }

    @property
    def span_from(self) -> float:
        return self.scale_from[1] - self.scale_from[0]

    @property
    def span_to(self) -> float:
        return self.scale_to[1] - self.scale_to[0]
