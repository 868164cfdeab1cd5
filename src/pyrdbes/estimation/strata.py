"""
Stratum and grand totals of number at age.

Stratum ratios (number per kg) are raised with the official landings of the
stratum, then summed over strata to a grand total per age.
"""

from __future__ import annotations

import logging

import polars as pl

from ..core.exceptions import OverlappingSchemesError, StratumMismatchError
from .aggregation import dense_group_sum
from .constants import LANDINGS_WEIGHT_TO_KG
from .validation import require_columns, require_no_missing

logger = logging.getLogger(__name__)


def ratio_estimate_strata(ratios: pl.DataFrame, landings: pl.DataFrame) -> pl.DataFrame:
    """Estimate total number at age for each stratum and sampling scheme.

    Parameters
    ----------
    ratios : pl.DataFrame
        Columns SDid, stratum, age and ratio
        (see :func:`~pyrdbes.estimation.ratio.ratio_wo_n`).
    landings : pl.DataFrame
        CL table with a ``stratum`` column added. CLofficialWeight is in
        tonnes.

    Returns
    -------
    pl.DataFrame
        Columns SDid, stratum, age and numAtAge.

    Raises
    ------
    MissingColumnError
        If ratios lack SDid or landings lack stratum.
    StratumMismatchError
        If a stratum occurs in only one of ratios and landings.
    """
    require_columns(ratios, ["SDid"], table="ratios")
    require_columns(landings, ["stratum"], table="CL")
    require_columns(ratios, ["stratum", "age", "ratio"], table="ratios")
    require_columns(landings, ["CLofficialWeight"], table="CL")

    ratio_strata = set(ratios.get_column("stratum").unique().to_list())
    landed_strata = set(landings.get_column("stratum").unique().to_list())
    if ratio_strata != landed_strata:
        raise StratumMismatchError(
            only_in_ratios=ratio_strata - landed_strata,
            only_in_landings=landed_strata - ratio_strata,
        )

    landed = dense_group_sum(
        landings.select(pl.col("stratum"), pl.col("CLofficialWeight").cast(pl.Float64)),
        ["stratum"],
        "CLofficialWeight",
        "landedWeight",
    )

    strata_totals = (
        landed.join(ratios.select(["SDid", "stratum", "age", "ratio"]), on="stratum")
        .with_columns(
            (pl.col("landedWeight") * LANDINGS_WEIGHT_TO_KG * pl.col("ratio")).alias(
                "numAtAge"
            )
        )
        .select(["SDid", "stratum", "age", "numAtAge"])
        .sort(["SDid", "stratum", "age"])
    )

    logger.debug(
        "Raised ratios of %d strata with %d landings records",
        len(ratio_strata),
        landings.height,
    )
    return strata_totals


def total_stratified(strata_totals: pl.DataFrame) -> pl.DataFrame:
    """Estimate the grand total number at age from stratum totals.

    Parameters
    ----------
    strata_totals : pl.DataFrame
        Columns SDid, stratum, age and numAtAge.

    Returns
    -------
    pl.DataFrame
        Columns age and numAtAge.

    Raises
    ------
    MissingValueError
        If any age is missing.
    OverlappingSchemesError
        If the same stratum and age are reported under more than one SDid.
    """
    require_columns(
        strata_totals, ["SDid", "stratum", "age", "numAtAge"], table="strata totals"
    )
    require_no_missing(strata_totals, "age", table="strata totals")

    overlaps = (
        strata_totals.group_by(["stratum", "age"])
        .agg(pl.col("SDid").n_unique().alias("schemes"))
        .filter(pl.col("schemes") > 1)
        .sort(["stratum", "age"])
    )
    if overlaps.height:
        raise OverlappingSchemesError(
            overlaps.select(["stratum", "age"]).iter_rows(), table="strata totals"
        )

    return dense_group_sum(strata_totals, ["age"], "numAtAge", "numAtAge")
