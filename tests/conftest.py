"""Shared fixtures for the PEIRS scoring tests."""

import logging

import numpy as np
import pandas as pd
import pytest

from peirs_toolbox import peirs_items


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("peirs_toolbox.tests")


@pytest.fixture
def all_fives() -> pd.DataFrame:
    """One respondent answering 5 to every default item, plus an unrelated column."""
    row = {item: 5 for item in peirs_items()}
    row["participant_id"] = "P001"
    return pd.DataFrame([row])


@pytest.fixture
def survey_50() -> pd.DataFrame:
    """50 respondents with random 1-5 answers, ~30% blanks and a few text codes."""
    rng = np.random.default_rng(1234)
    items = peirs_items()
    values = rng.integers(1, 6, size=(50, len(items))).astype(object)
    values[rng.random(values.shape) < 0.3] = ""
    values[rng.random(values.shape) < 0.02] = "refused"
    # two respondents who skipped everything
    values[7, :] = ""
    values[31, :] = None
    df = pd.DataFrame(values, columns=items)
    df.insert(0, "participant_id", [f"P{i:03d}" for i in range(50)])
    return df
