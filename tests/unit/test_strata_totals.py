"""Unit tests for landings raising and the grand total."""

import polars as pl
import pytest

from pyrdbes.core.exceptions import (
    MissingColumnError,
    MissingValueError,
    OverlappingSchemesError,
    StratumMismatchError,
)
from pyrdbes.estimation.constants import LANDINGS_WEIGHT_TO_KG
from pyrdbes.estimation.strata import ratio_estimate_strata, total_stratified


@pytest.fixture
def ratios():
    return pl.DataFrame(
        {
            "SDid": [1, 1, 1, 1],
            "stratum": ["A", "A", "B", "B"],
            "age": [2, 3, 2, 3],
            "ratio": [0.5, 0.25, 0.2, 0.1],
        }
    )


@pytest.fixture
def landings():
    return pl.DataFrame(
        {
            "CLid": [1, 2, 3],
            "stratum": ["A", "A", "B"],
            "CLofficialWeight": [1.5, 0.5, 4.0],
        }
    )


class TestRatioEstimateStrata:
    """Tests for ratio_estimate_strata."""

    def test_raises_ratios_with_landed_kg(self, ratios, landings):
        result = ratio_estimate_strata(ratios, landings)

        assert result.columns == ["SDid", "stratum", "age", "numAtAge"]
        # A landed 2 t, B landed 4 t
        assert result["numAtAge"].to_list() == pytest.approx(
            [1000.0, 500.0, 800.0, 400.0]
        )

    def test_tonnes_to_kg(self):
        assert LANDINGS_WEIGHT_TO_KG == 1000

    def test_ratios_need_sdid(self, ratios, landings):
        with pytest.raises(MissingColumnError) as exc:
            ratio_estimate_strata(ratios.drop("SDid"), landings)
        assert exc.value.columns == ["SDid"]

    def test_landings_need_stratum(self, ratios, landings):
        with pytest.raises(MissingColumnError) as exc:
            ratio_estimate_strata(ratios, landings.drop("stratum"))
        assert exc.value.table == "CL"

    def test_stratum_without_landings(self, ratios, landings):
        ratios = pl.concat(
            [
                ratios,
                pl.DataFrame(
                    {"SDid": [1], "stratum": ["X"], "age": [2], "ratio": [0.3]}
                ),
            ]
        )

        with pytest.raises(StratumMismatchError) as exc:
            ratio_estimate_strata(ratios, landings)
        assert exc.value.only_in_ratios == ["X"]
        assert exc.value.only_in_landings == []

    def test_landings_without_ratios(self, ratios, landings):
        landings = pl.concat(
            [
                landings,
                pl.DataFrame({"CLid": [4], "stratum": ["C"], "CLofficialWeight": [9.0]}),
            ]
        )

        with pytest.raises(StratumMismatchError, match="landed strata without ratios"):
            ratio_estimate_strata(ratios, landings)


class TestTotalStratified:
    """Tests for total_stratified."""

    @pytest.fixture
    def strata_totals(self):
        return pl.DataFrame(
            {
                "SDid": [1, 1, 1, 1, 2, 2],
                "stratum": ["A", "A", "B", "B", "C", "C"],
                "age": [2, 3, 2, 3, 2, 3],
                "numAtAge": [1000.0, 500.0, 800.0, 400.0, 10.0, 20.0],
            }
        )

    def test_sums_over_strata_and_schemes(self, strata_totals):
        result = total_stratified(strata_totals)

        assert result.columns == ["age", "numAtAge"]
        assert result.rows() == [(2, 1810.0), (3, 920.0)]

    def test_overlapping_schemes_rejected(self, strata_totals):
        overlapping = pl.concat(
            [
                strata_totals,
                pl.DataFrame(
                    {"SDid": [2], "stratum": ["A"], "age": [2], "numAtAge": [1000.0]}
                ),
            ]
        )

        with pytest.raises(OverlappingSchemesError, match="different SDid") as exc:
            total_stratified(overlapping)
        assert exc.value.overlaps == [("A", 2)]

    def test_schemes_may_share_stratum_at_different_ages(self, strata_totals):
        disjoint = pl.concat(
            [
                strata_totals,
                pl.DataFrame(
                    {"SDid": [2], "stratum": ["A"], "age": [4], "numAtAge": [5.0]}
                ),
            ]
        )

        result = total_stratified(disjoint)

        assert result.rows() == [(2, 1810.0), (3, 920.0), (4, 5.0)]

    def test_missing_age_rejected(self, strata_totals):
        with_missing = strata_totals.with_columns(
            pl.Series("age", [2, 3, 2, None, 2, 3], dtype=pl.Int64)
        )

        with pytest.raises(MissingValueError, match="age"):
            total_stratified(with_missing)

    def test_missing_num_at_age_propagates(self, strata_totals):
        with_missing = strata_totals.with_columns(
            pl.Series("numAtAge", [1000.0, None, 800.0, 400.0, 10.0, 20.0])
        )

        result = total_stratified(with_missing)

        assert result["numAtAge"].to_list() == [1810.0, None]
