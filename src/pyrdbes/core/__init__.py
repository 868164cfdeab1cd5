"""Core building blocks: the exception hierarchy and RDBES record layouts."""

from .exceptions import (
    ConfigurationError,
    MissingColumnError,
    MissingValueError,
    MultiplicityError,
    OverlappingSchemesError,
    PreconditionError,
    PyRDBESError,
    ReferentialError,
    StratumMismatchError,
    UnsupportedDesignError,
)
from .hierarchy import HierarchyLevel, SampleUnitColumns

__all__ = [
    "ConfigurationError",
    "HierarchyLevel",
    "MissingColumnError",
    "MissingValueError",
    "MultiplicityError",
    "OverlappingSchemesError",
    "PreconditionError",
    "PyRDBESError",
    "ReferentialError",
    "SampleUnitColumns",
    "StratumMismatchError",
    "UnsupportedDesignError",
]
