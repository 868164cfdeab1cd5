"""
Expansion of sample totals up the sampling hierarchy.

Sample (SA) histograms are raised to species-selection (SS) totals with the
Horvitz-Thompson estimator, and species-selection totals are summed to haul
(FO) totals when species lists are applied as a census. Live weights follow
the same route without inverse-probability weighting.

All four stages require a single-species SA table, and the census stages
reject species lists that were sampled from a larger set of lists.
"""

from __future__ import annotations

import logging

import polars as pl

from .aggregation import dense_group_sum
from .constants import CENSUS, FLAG_NO
from .validation import (
    require_all_equal,
    require_columns,
    require_no_missing,
    require_single_value,
)

logger = logging.getLogger(__name__)


def _check_single_species_unstratified(sa: pl.DataFrame) -> None:
    require_all_equal(
        sa,
        "SAstratification",
        FLAG_NO,
        table="SA",
        reason="stratified samples are not supported",
    )
    require_no_missing(sa, "SAspeciesCode", table="SA")
    require_single_value(sa, "SAspeciesCode", table="SA")


def _check_census(ss: pl.DataFrame) -> None:
    require_all_equal(
        ss,
        "SSselectionMethod",
        CENSUS,
        table="SS",
        reason="species lists sampled from a set of lists are not supported",
    )


def num_at_age_species_selection_ht(
    sa: pl.DataFrame, sample_totals: pl.DataFrame
) -> pl.DataFrame:
    """Horvitz-Thompson estimate of number at age per species selection.

    Each sample's count is weighted by the reciprocal of its inclusion
    probability and the weighted counts are summed per SSid and age.

    Parameters
    ----------
    sa : pl.DataFrame
        SA table with columns SSid, SAid, SAinclusionProb, SAstratification
        and SAspeciesCode.
    sample_totals : pl.DataFrame
        Number at age per sample, columns SAid, age and count
        (see :func:`~pyrdbes.estimation.age.num_at_age_bv`).

    Returns
    -------
    pl.DataFrame
        Columns SSid, age and total (Float64). Every SSid x age combination
        is present; combinations without data have a null total.

    Raises
    ------
    MissingValueError
        If any inclusion probability or species code is missing.
    UnsupportedDesignError
        If any sample is stratified.
    MultiplicityError
        If the SA table holds more than one species.
    """
    require_columns(
        sa,
        ["SSid", "SAid", "SAinclusionProb", "SAstratification", "SAspeciesCode"],
        table="SA",
    )
    require_columns(sample_totals, ["SAid", "age", "count"], table="sample totals")

    require_no_missing(sa, "SAinclusionProb", table="SA")
    _check_single_species_unstratified(sa)

    weighted = (
        sa.select(["SSid", "SAid", "SAinclusionProb"])
        .join(sample_totals.select(["SAid", "age", "count"]), on="SAid", how="inner")
        .with_columns(
            (pl.col("count") / pl.col("SAinclusionProb")).alias("weighted_count")
        )
    )

    totals = dense_group_sum(weighted, ["SSid", "age"], "weighted_count", "total")
    logger.debug(
        "HT-expanded %d samples to %d species selections",
        weighted.get_column("SAid").n_unique(),
        totals.get_column("SSid").n_unique(),
    )
    return totals


def num_at_age_haul_census(ss: pl.DataFrame, ss_totals: pl.DataFrame) -> pl.DataFrame:
    """Sum species-selection number at age to haul (FOid) level.

    Parameters
    ----------
    ss : pl.DataFrame
        SS table with columns FOid, SSid and SSselectionMethod.
    ss_totals : pl.DataFrame
        Number at age per species selection, columns SSid, age and total.

    Returns
    -------
    pl.DataFrame
        Columns FOid, age and total, dense over FOid x age.

    Raises
    ------
    UnsupportedDesignError
        If any species list was not applied as a census.
    """
    require_columns(ss, ["FOid", "SSid", "SSselectionMethod"], table="SS")
    require_columns(ss_totals, ["SSid", "age", "total"], table="SS totals")
    _check_census(ss)

    hauls = ss.select(["FOid", "SSid"]).join(
        ss_totals.select(["SSid", "age", "total"]), on="SSid", how="inner"
    )
    return dense_group_sum(hauls, ["FOid", "age"], "total", "total")


def total_weight_species_selection(sa: pl.DataFrame) -> pl.DataFrame:
    """Total live weight per species selection.

    Parameters
    ----------
    sa : pl.DataFrame
        SA table with columns SSid, SAstratification, SAspeciesCode and
        SAtotalWeightLive.

    Returns
    -------
    pl.DataFrame
        Columns SSid and weight (Float64).

    Raises
    ------
    UnsupportedDesignError
        If any sample is stratified.
    MissingValueError
        If any species code is missing.
    MultiplicityError
        If the SA table holds more than one species.
    """
    require_columns(
        sa,
        ["SSid", "SAstratification", "SAspeciesCode", "SAtotalWeightLive"],
        table="SA",
    )
    _check_single_species_unstratified(sa)

    weights = sa.select(
        pl.col("SSid"), pl.col("SAtotalWeightLive").cast(pl.Float64)
    )
    return dense_group_sum(weights, ["SSid"], "SAtotalWeightLive", "weight")


def total_weight_haul_census(ss: pl.DataFrame, ss_weights: pl.DataFrame) -> pl.DataFrame:
    """Sum species-selection weights to haul (FOid) level.

    Parameters
    ----------
    ss : pl.DataFrame
        SS table with columns FOid, SSid and SSselectionMethod.
    ss_weights : pl.DataFrame
        Weight per species selection, columns SSid and weight.

    Returns
    -------
    pl.DataFrame
        Columns FOid and weight.

    Raises
    ------
    UnsupportedDesignError
        If any species list was not applied as a census.
    """
    require_columns(ss, ["FOid", "SSid", "SSselectionMethod"], table="SS")
    require_columns(ss_weights, ["SSid", "weight"], table="SS weights")
    _check_census(ss)

    hauls = ss.select(["FOid", "SSid"]).join(
        ss_weights.select(["SSid", "weight"]), on="SSid", how="inner"
    )
    return dense_group_sum(hauls, ["FOid"], "weight", "weight")
