"""Tests for the PEIRS descriptive summary."""

import numpy as np
import pandas as pd
import pytest

from peirs_toolbox import MissingItemsWarning, SchemaError, ScoreResult, SummaryReporter, score, summarize
from peirs_toolbox.analyzers.summary_analyzer import describe_series


def _result_from(scores: pd.DataFrame) -> ScoreResult:
    return ScoreResult(
        scores=scores,
        items_requested=("a", "b", "c"),
        items_used=("a", "b"),
        items_missing=("c",),
        scale_from=(1.0, 5.0),
        scale_to=(0.0, 4.0),
    )


def test_summary_shape_on_fifty_rows(survey_50):
    result = score(survey_50)
    stats = summarize(result)
    table = stats.table
    assert list(table.index) == ["raw_total", "items_answered", "standardized"]
    assert list(table.columns) == ["n", "mean", "sd", "min", "q25", "median", "q75", "max"]
    assert (table["n"] <= 50).all()
    assert table.loc["raw_total", "n"] == 50
    assert table.loc["standardized", "n"] == int((result.scores["items_answered"] > 0).sum())
    assert table.loc["standardized", "n"] == 48


def test_statistics_match_known_values():
    scores = pd.DataFrame({
        "raw_total": [0.0, 10.0, 20.0, 30.0],
        "items_answered": [0, 5, 5, 10],
        "standardized": [np.nan, 50.0, 100.0, 75.0],
        "response_status": ["Too few items", "Valid", "Valid", "Valid"],
    })
    table = summarize(_result_from(scores)).table

    raw = table.loc["raw_total"]
    assert raw["n"] == 4
    assert raw["mean"] == pytest.approx(15.0)
    assert raw["sd"] == pytest.approx(np.std([0, 10, 20, 30], ddof=1))
    assert raw["min"] == 0.0
    assert raw["q25"] == pytest.approx(7.5)
    assert raw["median"] == pytest.approx(15.0)
    assert raw["q75"] == pytest.approx(22.5)
    assert raw["max"] == 30.0

    std = table.loc["standardized"]
    assert std["n"] == 3
    assert std["median"] == pytest.approx(75.0)
    assert std["q25"] == pytest.approx(62.5)
    assert std["q75"] == pytest.approx(87.5)


def test_all_missing_column_gives_missing_statistics():
    stats = describe_series(pd.Series([np.nan, np.nan]))
    assert stats["n"] == 0
    for name in ("mean", "sd", "min", "q25", "median", "q75", "max"):
        assert np.isnan(stats[name])


def test_single_value_has_missing_sd():
    stats = describe_series(pd.Series([42.0, np.nan]))
    assert stats["n"] == 1
    assert stats["mean"] == 42.0
    assert np.isnan(stats["sd"])


def test_missing_columns_raise_schema_error():
    scores = pd.DataFrame({"raw_total": [1.0], "response_status": ["Valid"]})
    with pytest.raises(SchemaError) as excinfo:
        summarize(_result_from(scores))
    assert excinfo.value.missing_columns == ["items_answered", "standardized"]
    assert "items_answered" in str(excinfo.value)


def test_plain_dataframe_rejected(survey_50):
    with pytest.raises(SchemaError, match="ScoreResult"):
        summarize(score(survey_50).scores)


def test_item_counts_and_rendering(all_fives):
    with pytest.warns(MissingItemsWarning):
        result = score(all_fives.drop(columns=["be1", "be2"]), strict=False)
    stats = summarize(result)
    assert (stats.n_items_requested, stats.n_items_used, stats.n_items_missing) == (27, 25, 2)

    text = str(stats)
    lines = text.splitlines()
    assert lines[0] == "PEIRS Scoring Summary"
    assert lines[1] == "Items requested: 27 | Items used: 25 | Missing: 2"
    assert lines[2] == ""
    assert "standardized" in text
    assert "100.0" in text


def test_reporter_matches_render(survey_50, logger):
    stats = summarize(score(survey_50))
    assert SummaryReporter(logger).generate_summary(stats) == stats.render()


def test_summary_does_not_modify_scores(survey_50):
    result = score(survey_50)
    before = result.scores.copy()
    summarize(result)
    pd.testing.assert_frame_equal(result.scores, before)
