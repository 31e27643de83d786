"""Tests for the linear rescaling step."""

import logging

import numpy as np
import pandas as pd
import pytest

from peirs_toolbox import ConfigurationError, linear_rescale
from peirs_toolbox.processors.rescale_processor import RescaleProcessor


def test_default_likert_range_maps_onto_zero_to_four():
    """1..5 maps onto 0..4."""
    np.testing.assert_allclose(linear_rescale([1, 2, 3, 4, 5], (1, 5), (0, 4)), [0, 1, 2, 3, 4])


def test_zero_to_ten_midpoint():
    """A 5 on a 0-10 scale becomes 2.0 on 0-4."""
    assert linear_rescale([5], (0, 10), (0, 4))[0] == pytest.approx(2.0)


def test_nan_stays_nan():
    out = linear_rescale([np.nan, 3.0], (1, 5), (0, 4))
    assert np.isnan(out[0])
    assert out[1] == pytest.approx(2.0)


def test_out_of_range_values_extrapolate():
    """Responses outside the source range are not clipped."""
    np.testing.assert_allclose(linear_rescale([0, 6], (1, 5), (0, 4)), [-1, 5])


def test_round_trip_recovers_original():
    values = np.array([1.0, 1.5, 2.25, 3.0, 4.75, 5.0])
    there = linear_rescale(values, (1, 5), (0, 4))
    back = linear_rescale(there, (0, 4), (1, 5))
    np.testing.assert_allclose(back, values, rtol=0, atol=1e-12)


def test_round_trip_odd_ranges():
    values = np.linspace(-3.0, 7.0, 11)
    there = linear_rescale(values, (-3, 7), (10, -2))
    np.testing.assert_allclose(linear_rescale(there, (10, -2), (-3, 7)), values, atol=1e-12)


def test_zero_width_source_range_rejected():
    with pytest.raises(ConfigurationError):
        linear_rescale([1, 2], (3, 3), (0, 4))


def test_processor_keeps_index_and_columns(caplog):
    processor = RescaleProcessor(logging.getLogger("peirs_toolbox.tests"))
    item_df = pd.DataFrame({"a": [1.0, np.nan], "b": [5.0, 9.0]}, index=["r1", "r2"])
    with caplog.at_level(logging.WARNING):
        out = processor.rescale(item_df, (1, 5), (0, 4))
    assert list(out.index) == ["r1", "r2"]
    assert list(out.columns) == ["a", "b"]
    assert np.isnan(out.loc["r2", "a"])
    assert out.loc["r2", "b"] == pytest.approx(8.0)
    assert "outside" in caplog.text

    back = processor.inverse(out, (1, 5), (0, 4))
    pd.testing.assert_frame_equal(back, item_df)
