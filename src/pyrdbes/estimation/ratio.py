"""
Stratified ratio of number at age to weight.

Estimates, for each parent unit and stratum, the number of fish at each age
per unit of catch weight:

    R_hs(a) = Σ_i Y_i(a) / Σ_i W_i

where the sums run over the sampled units i of stratum s under parent h,
Y_i(a) is the estimated number at age a in unit i and W_i its estimated
weight. This is the combined ratio estimator used when the number of
sampling units in the population is unknown but a total weight is (the
landings, see :mod:`pyrdbes.estimation.strata`).

Units are assumed selected by simple random sampling without replacement
within strata. Clustered samples are rejected.
"""

from __future__ import annotations

import logging
from typing import Union

import polars as pl

from ..core.exceptions import MissingColumnError, UnsupportedDesignError
from ..core.hierarchy import HierarchyLevel, SampleUnitColumns
from .aggregation import dense_group_sum
from .constants import FLAG_NO, FLAG_YES, UNSTRATIFIED
from .validation import require_all_equal, require_columns, require_no_missing

logger = logging.getLogger(__name__)


def _check_stratification(sample_table: pl.DataFrame, cols: SampleUnitColumns) -> None:
    """Stratum name must be "U" exactly when the stratification flag is "N"."""
    require_no_missing(sample_table, cols.stratification, table=cols.level)
    require_no_missing(sample_table, cols.stratum_name, table=cols.level)

    flag = pl.col(cols.stratification)
    name = pl.col(cols.stratum_name)

    bad_flags = sample_table.filter(~flag.is_in([FLAG_YES, FLAG_NO]))
    if bad_flags.height:
        raise UnsupportedDesignError(
            f"{cols.stratification} must be {FLAG_YES!r} or {FLAG_NO!r}, found "
            f"{bad_flags.get_column(cols.stratification).unique().to_list()}",
            check="stratification_flag",
            table=cols.level,
        )

    unnamed = sample_table.filter((flag == FLAG_YES) & (name == UNSTRATIFIED))
    if unnamed.height:
        raise UnsupportedDesignError(
            f"{unnamed.height} stratified row(s) have {cols.stratum_name} "
            f"{UNSTRATIFIED!r}",
            check="stratum_name_consistency",
            table=cols.level,
        )

    named = sample_table.filter((flag == FLAG_NO) & (name != UNSTRATIFIED))
    if named.height:
        raise UnsupportedDesignError(
            f"{named.height} unstratified row(s) have {cols.stratum_name} other "
            f"than {UNSTRATIFIED!r}",
            check="stratum_name_consistency",
            table=cols.level,
        )


def ratio_wo_n(
    sample_unit_type: Union[HierarchyLevel, str],
    sample_table: pl.DataFrame,
    num_at_age: pl.DataFrame,
    total_weight: pl.DataFrame,
    parent_id_col: str,
) -> pl.DataFrame:
    """Estimate the ratio of number at age to weight per parent and stratum.

    The estimator works on a sample of any kind of sampling unit in the RDBES
    hierarchy. ``sample_table`` is the table of that level (e.g. the FO
    table) and carries its stratification and clustering. ``num_at_age`` and
    ``total_weight`` hold the estimates for each unit in the sample, keyed by
    the unit id column of the level (e.g. FOid).

    Parameters
    ----------
    sample_unit_type : HierarchyLevel or str
        Record type of the sampling units, e.g. ``"FO"``.
    sample_table : pl.DataFrame
        Table of the sampled units with id, stratification, stratum name,
        clustering and parent id columns.
    num_at_age : pl.DataFrame
        Columns <unit id>, age and total.
    total_weight : pl.DataFrame
        Columns <unit id> and weight.
    parent_id_col : str
        Column of ``sample_table`` identifying the parent sample in the
        hierarchy (e.g. ``"SDid"``).

    Returns
    -------
    pl.DataFrame
        Columns ``parent_id_col``, stratum, age and ratio, sorted by the first
        three.

    Raises
    ------
    UnsupportedDesignError
        If stratification flags and stratum names disagree, or the sample is
        clustered.
    MissingColumnError
        If ``parent_id_col`` or any design column is absent.
    """
    level = HierarchyLevel.coerce(sample_unit_type)
    cols = level.columns(parent_id_col)

    require_columns(sample_table, cols.design_columns, table=cols.level)
    _check_stratification(sample_table, cols)
    if parent_id_col not in sample_table.columns:
        raise MissingColumnError([parent_id_col], table=cols.level)
    require_all_equal(
        sample_table,
        cols.clustering,
        FLAG_NO,
        table=cols.level,
        reason="clustered sampling is not supported",
    )
    require_columns(num_at_age, [cols.id, "age", "total"], table="number at age")
    require_columns(total_weight, [cols.id, "weight"], table="total weight")

    units = sample_table.select(
        pl.col(cols.id),
        pl.col(parent_id_col),
        pl.col(cols.stratum_name).alias("stratum"),
    )
    counts = units.join(
        num_at_age.select([cols.id, "age", "total"]), on=cols.id, how="inner"
    )
    weights = units.join(
        total_weight.select([cols.id, "weight"]), on=cols.id, how="inner"
    )

    strata_num_at_age = dense_group_sum(
        counts,
        [parent_id_col, "stratum", "age"],
        "total",
        "strataTotalNumAtAge",
        within=[parent_id_col, "stratum"],
    )
    strata_weight = dense_group_sum(
        weights,
        [parent_id_col, "stratum"],
        "weight",
        "strataWeight",
        within=[parent_id_col, "stratum"],
    )

    ratios = (
        strata_num_at_age.join(
            strata_weight, on=[parent_id_col, "stratum"], how="inner"
        )
        .with_columns(
            (pl.col("strataTotalNumAtAge") / pl.col("strataWeight")).alias("ratio")
        )
        .select([parent_id_col, "stratum", "age", "ratio"])
        .sort([parent_id_col, "stratum", "age"])
    )

    logger.debug(
        "Estimated %s ratios for %d strata from %d units",
        level.value,
        strata_weight.height,
        units.height,
    )
    return ratios
