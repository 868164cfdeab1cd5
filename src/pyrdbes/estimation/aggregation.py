"""
Dense grouped summation.

Estimation stages must never drop a group just because no row fell into it.
Summing is therefore done against an explicit key space: the Cartesian product
of the observed levels of each grouping column. Observed rows are summed and
left-joined onto the key space, so an empty group comes out as null (declared
missing) instead of disappearing. A group that contains a null value also sums
to null.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import polars as pl

logger = logging.getLogger(__name__)


def key_space(
    data: pl.DataFrame,
    by: Sequence[str],
    within: Optional[Sequence[str]] = None,
) -> pl.DataFrame:
    """Build the full key space of ``by`` for ``data``.

    Parameters
    ----------
    data : pl.DataFrame
        Relation whose observed levels define the key space.
    by : Sequence[str]
        Grouping columns.
    within : Sequence[str], optional
        Subset of ``by`` whose observed *combinations* are kept as one
        dimension instead of being crossed with each other. The remaining
        columns of ``by`` are crossed against these combinations.

    Returns
    -------
    pl.DataFrame
        One row per key, columns in the order of ``by``.
    """
    within = list(within or [])
    axes = [col for col in by if col not in within]

    space = data.select(within).unique() if within else None
    for col in axes:
        levels = data.select(col).unique()
        space = levels if space is None else space.join(levels, how="cross")

    return space.select(list(by))


def dense_group_sum(
    data: pl.DataFrame,
    by: Sequence[str],
    value_col: str,
    alias: str,
    within: Optional[Sequence[str]] = None,
) -> pl.DataFrame:
    """Sum ``value_col`` per group of ``by`` over the full key space.

    Parameters
    ----------
    data : pl.DataFrame
        Rows to aggregate.
    by : Sequence[str]
        Grouping columns.
    value_col : str
        Column to sum.
    alias : str
        Name of the output sum column.
    within : Sequence[str], optional
        Grouping columns whose observed combinations are not crossed with
        each other (see :func:`key_space`).

    Returns
    -------
    pl.DataFrame
        ``by`` columns plus ``alias``, sorted by ``by``. Empty groups and
        groups containing a null value have a null sum.
    """
    by = list(by)
    sums = data.group_by(by).agg(
        pl.when(pl.col(value_col).null_count() > 0)
        .then(pl.lit(None))
        .otherwise(pl.col(value_col).sum())
        .alias(alias)
    )
    space = key_space(data, by, within)
    result = space.join(sums, on=by, how="left").sort(by)

    n_empty = result.get_column(alias).null_count()
    if n_empty:
        logger.debug(
            "%d of %d groups by %s have no complete %s values",
            n_empty,
            result.height,
            by,
            value_col,
        )
    return result
