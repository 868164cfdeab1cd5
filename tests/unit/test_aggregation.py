"""Unit tests for dense grouped summation."""

import polars as pl

from pyrdbes.estimation.aggregation import dense_group_sum, key_space


class TestKeySpace:
    """Tests for key_space."""

    def test_cartesian_product_of_levels(self):
        data = pl.DataFrame({"id": [1, 2], "age": [3, 4]})

        space = key_space(data, ["id", "age"])

        assert sorted(space.rows()) == [(1, 3), (1, 4), (2, 3), (2, 4)]

    def test_within_keeps_observed_combinations(self):
        data = pl.DataFrame(
            {"sd": [1, 2, 2], "stratum": ["A", "B", "B"], "age": [1, 1, 2]}
        )

        space = key_space(data, ["sd", "stratum", "age"], within=["sd", "stratum"])

        assert space.columns == ["sd", "stratum", "age"]
        assert sorted(space.rows()) == [
            (1, "A", 1),
            (1, "A", 2),
            (2, "B", 1),
            (2, "B", 2),
        ]


class TestDenseGroupSum:
    """Tests for dense_group_sum."""

    def test_empty_groups_are_null(self):
        data = pl.DataFrame({"id": [1, 1, 2], "age": [3, 4, 4], "n": [1.0, 2.0, 5.0]})

        result = dense_group_sum(data, ["id", "age"], "n", "total")

        assert result.rows() == [(1, 3, 1.0), (1, 4, 2.0), (2, 3, None), (2, 4, 5.0)]

    def test_groups_with_missing_values_are_null(self):
        data = pl.DataFrame({"id": [1, 1, 2], "n": [1.0, None, 5.0]})

        result = dense_group_sum(data, ["id"], "n", "total")

        assert result.rows() == [(1, None), (2, 5.0)]

    def test_sums(self):
        data = pl.DataFrame({"id": [2, 1, 2, 1], "n": [1, 2, 3, 4]})

        result = dense_group_sum(data, ["id"], "n", "n")

        assert result.rows() == [(1, 6), (2, 4)]
