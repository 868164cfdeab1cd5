"""
Exception hierarchy for pyRDBES estimation.

Every estimation stage validates its inputs before computing anything and
fails fast with one of the errors below. None of them are recoverable inside
the library: the caller is expected to fix the input tables and rerun the
stage.

PyRDBESError
├── PreconditionError
│   ├── MissingValueError        required value is null
│   ├── UnsupportedDesignError   stratified/clustered/non-census design
│   ├── MultiplicityError        more than one of something that must be unique
│   │   └── OverlappingSchemesError
│   └── ReferentialError         tables do not line up
│       ├── MissingColumnError
│       └── StratumMismatchError
└── ConfigurationError
"""

from __future__ import annotations

from typing import Iterable, Optional


class PyRDBESError(Exception):
    """Base class for all pyRDBES errors."""


class PreconditionError(PyRDBESError, ValueError):
    """An input relation violates a precondition of an estimation stage.

    Parameters
    ----------
    message : str
        Human readable description of the violation.
    check : str, optional
        Short identifier of the failed check (e.g. ``"census_selection"``).
    table : str, optional
        Name of the input relation that failed the check (e.g. ``"SS"``).
    """

    def __init__(
        self, message: str, check: Optional[str] = None, table: Optional[str] = None
    ):
        self.check = check
        self.table = table
        prefix = f"[{table}] " if table else ""
        super().__init__(f"{prefix}{message}")


class MissingValueError(PreconditionError):
    """A column that must be complete contains missing values."""


class UnsupportedDesignError(PreconditionError):
    """The sampling design recorded in the table is not supported."""


class MultiplicityError(PreconditionError):
    """A value that must be unique within an aggregation unit is not."""


class OverlappingSchemesError(MultiplicityError):
    """The same stratum and age are reported under different sampling schemes."""

    def __init__(self, overlaps: Iterable[tuple], table: Optional[str] = None):
        self.overlaps = list(overlaps)
        shown = ", ".join(f"(stratum={s!r}, age={a})" for s, a in self.overlaps[:5])
        more = f" and {len(self.overlaps) - 5} more" if len(self.overlaps) > 5 else ""
        super().__init__(
            "Overlapping sampling schemes not supported. Some age is reported "
            f"in the same stratum with different SDid: {shown}{more}",
            check="overlapping_schemes",
            table=table,
        )


class ReferentialError(PreconditionError):
    """Input relations do not reference each other consistently."""


class MissingColumnError(ReferentialError):
    """A required column is absent from an input relation."""

    def __init__(self, columns: Iterable[str], table: Optional[str] = None):
        self.columns = sorted(columns)
        super().__init__(
            f"Missing required column(s): {', '.join(self.columns)}",
            check="required_columns",
            table=table,
        )


class StratumMismatchError(ReferentialError):
    """Strata present in the ratios and in the landings differ."""

    def __init__(self, only_in_ratios: Iterable, only_in_landings: Iterable):
        self.only_in_ratios = sorted(only_in_ratios, key=str)
        self.only_in_landings = sorted(only_in_landings, key=str)
        parts = []
        if self.only_in_ratios:
            parts.append(f"strata without landings: {self.only_in_ratios}")
        if self.only_in_landings:
            parts.append(f"landed strata without ratios: {self.only_in_landings}")
        super().__init__(
            "Strata in ratios and landings must be identical; " + "; ".join(parts),
            check="stratum_coverage",
        )


class ConfigurationError(PyRDBESError, ValueError):
    """Invalid estimator configuration or missing input table."""
