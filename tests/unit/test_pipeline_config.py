"""Unit tests for NumAtAgeEstimator configuration handling."""

import polars as pl
import pytest

from pyrdbes.core.exceptions import ConfigurationError
from pyrdbes.estimation.pipeline import NumAtAgeEstimator


class TestConfig:
    """Tests for config parsing and validation."""

    def test_defaults(self):
        estimator = NumAtAgeEstimator({})

        assert estimator.min_age is None
        assert estimator.max_age is None
        assert estimator.parent_id == "SDid"
        assert estimator.landings_stratum is None

    def test_required_tables(self):
        estimator = NumAtAgeEstimator({})

        assert estimator.get_required_tables() == ["BV", "SA", "SS", "FO", "CL"]

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="maxage"):
            NumAtAgeEstimator({}, {"maxage": 10})

    def test_non_integer_age(self):
        with pytest.raises(ConfigurationError, match="min_age"):
            NumAtAgeEstimator({}, {"min_age": 1.5})

    def test_min_age_above_max_age(self):
        with pytest.raises(ConfigurationError, match="exceeds"):
            NumAtAgeEstimator({}, {"min_age": 8, "max_age": 2})

    def test_missing_table(self):
        tables = {"BV": pl.DataFrame(), "SA": pl.DataFrame()}

        with pytest.raises(ConfigurationError, match="'SS'"):
            NumAtAgeEstimator(tables).estimate()

    def test_unknown_landings_stratum_column(self):
        tables = {"CL": pl.DataFrame({"CLofficialWeight": [1.0]})}
        estimator = NumAtAgeEstimator(tables, {"landings_stratum": "CLarea"})

        with pytest.raises(ConfigurationError, match="CLarea"):
            estimator._landings()
