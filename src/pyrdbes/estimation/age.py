"""
Number-at-age tabulation of biological observations.

Turns the age readings of the BV table into a dense histogram per sample
(SAid): one row for every sample and every age in the requested range, with
zero counts kept.
"""

from __future__ import annotations

import logging
from typing import Optional

import polars as pl

from ..core.exceptions import ConfigurationError, MissingValueError
from .constants import AGE_TYPE, FLAG_NO
from .validation import require_all_equal, require_columns, require_no_missing

logger = logging.getLogger(__name__)

BV_COLUMNS = ["SAid", "BVtype", "BVstratification", "BVvalue"]


def num_at_age_bv(
    bv: pl.DataFrame,
    min_age: Optional[int] = None,
    max_age: Optional[int] = None,
) -> pl.DataFrame:
    """Count fish at each age in ``[min_age, max_age]`` for each sample.

    Parameters
    ----------
    bv : pl.DataFrame
        BV table with columns SAid, BVtype, BVstratification and BVvalue.
        Only rows with ``BVtype == "Age"`` are used.
    min_age : int, optional
        Smallest age to tabulate. Taken from the data when None.
    max_age : int, optional
        Largest age to tabulate. Taken from the data when None.

    Returns
    -------
    pl.DataFrame
        Columns SAid, age (Int64) and count (Int64), one row per combination
        of sampled SAid and age in the range, sorted by SAid and age.

    Raises
    ------
    UnsupportedDesignError
        If any fish was selected for ageing in a stratified manner.
    MissingValueError
        If any age reading is missing, or the range cannot be derived
        because there are no age readings.
    ConfigurationError
        If ``min_age`` is greater than ``max_age``.
    """
    require_columns(bv, BV_COLUMNS, table="BV")

    ages = bv.filter(pl.col("BVtype") == AGE_TYPE)
    require_all_equal(
        ages,
        "BVstratification",
        FLAG_NO,
        table="BV",
        reason="stratified selection of aged fish is not supported",
    )
    require_no_missing(ages, "BVvalue", table="BV")

    # BVvalue is stored as text in RDBES exports
    ages = ages.select(
        pl.col("SAid"),
        pl.col("BVvalue").cast(pl.Float64).cast(pl.Int64).alias("BVvalue"),
    )

    if min_age is None or max_age is None:
        if ages.height == 0:
            raise MissingValueError(
                "No age readings to derive the age range from",
                check="age_range",
                table="BV",
            )
        if min_age is None:
            min_age = ages.get_column("BVvalue").min()
        if max_age is None:
            max_age = ages.get_column("BVvalue").max()

    if min_age > max_age:
        raise ConfigurationError(f"min_age ({min_age}) exceeds max_age ({max_age})")

    age_range = pl.DataFrame(
        {"age": list(range(min_age, max_age + 1))}, schema={"age": pl.Int64}
    )

    counts = (
        ages.join(age_range, how="cross")
        .group_by(["SAid", "age"])
        .agg((pl.col("BVvalue") == pl.col("age")).sum().cast(pl.Int64).alias("count"))
        .sort(["SAid", "age"])
    )

    logger.debug(
        "Tabulated %d age readings into %d SAid x age cells (ages %d-%d)",
        ages.height,
        counts.height,
        min_age,
        max_age,
    )
    return counts
