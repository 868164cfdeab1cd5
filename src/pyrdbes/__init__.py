"""
pyRDBES: design-based estimation of number at age from RDBES data.
"""

import logging

from .core.exceptions import (
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
from .core.hierarchy import HierarchyLevel, SampleUnitColumns
from .display import display_estimate
from .estimation import (
    EstimationResult,
    NumAtAgeEstimator,
    estimate_num_at_age,
    num_at_age_bv,
    num_at_age_haul_census,
    num_at_age_species_selection_ht,
    ratio_estimate_strata,
    ratio_variance_strata,
    ratio_variance_total,
    ratio_variance_wo_n,
    ratio_wo_n,
    total_stratified,
    total_weight_haul_census,
    total_weight_species_selection,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "EstimationResult",
    "HierarchyLevel",
    "MissingColumnError",
    "MissingValueError",
    "MultiplicityError",
    "NumAtAgeEstimator",
    "OverlappingSchemesError",
    "PreconditionError",
    "PyRDBESError",
    "ReferentialError",
    "SampleUnitColumns",
    "StratumMismatchError",
    "UnsupportedDesignError",
    "display_estimate",
    "estimate_num_at_age",
    "num_at_age_bv",
    "num_at_age_haul_census",
    "num_at_age_species_selection_ht",
    "ratio_estimate_strata",
    "ratio_variance_strata",
    "ratio_variance_total",
    "ratio_variance_wo_n",
    "ratio_wo_n",
    "total_stratified",
    "total_weight_haul_census",
    "total_weight_species_selection",
]
