"""
Precondition checks over polars frames.

Each helper raises the matching :mod:`pyrdbes.core.exceptions` error when the
check fails and returns ``None`` otherwise. Nulls never satisfy an equality
check: a missing flag is not ``"N"``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Type

import polars as pl

from ..core.exceptions import (
    MissingColumnError,
    MissingValueError,
    MultiplicityError,
    PreconditionError,
    UnsupportedDesignError,
)


def require_columns(df: pl.DataFrame, columns: Iterable[str], table: str) -> None:
    """Raise MissingColumnError if any of ``columns`` is absent from ``df``."""
    missing = set(columns) - set(df.columns)
    if missing:
        raise MissingColumnError(missing, table=table)


def require_no_missing(df: pl.DataFrame, column: str, table: str) -> None:
    """Raise MissingValueError if ``column`` holds any null."""
    n_missing = df.get_column(column).null_count()
    if n_missing:
        raise MissingValueError(
            f"{n_missing} row(s) have missing values for {column}",
            check=f"{column}_not_missing",
            table=table,
        )


def require_all_equal(
    df: pl.DataFrame,
    column: str,
    value: str,
    table: str,
    error: Type[PreconditionError] = UnsupportedDesignError,
    reason: Optional[str] = None,
) -> None:
    """Raise ``error`` unless every row of ``column`` equals ``value``."""
    offending = df.filter(~pl.col(column).eq(value).fill_null(False))
    if offending.height:
        found = offending.get_column(column).unique().to_list()
        detail = f" ({reason})" if reason else ""
        raise error(
            f"{offending.height} row(s) have {column} other than {value!r}, "
            f"found {found}{detail}",
            check=f"{column}_is_{value}",
            table=table,
        )


def require_single_value(df: pl.DataFrame, column: str, table: str) -> None:
    """Raise MultiplicityError unless ``column`` holds exactly one distinct value."""
    values = df.get_column(column).unique().to_list()
    if len(values) != 1:
        raise MultiplicityError(
            f"Expected exactly one distinct {column}, found {len(values)}: {values}",
            check=f"single_{column}",
            table=table,
        )
