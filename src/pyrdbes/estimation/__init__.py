"""
Estimation of number at age from RDBES sampling data.
"""

from .age import num_at_age_bv
from .expansion import (
    num_at_age_haul_census,
    num_at_age_species_selection_ht,
    total_weight_haul_census,
    total_weight_species_selection,
)
from .pipeline import EstimationResult, NumAtAgeEstimator, estimate_num_at_age
from .ratio import ratio_wo_n
from .strata import ratio_estimate_strata, total_stratified
from .variance import ratio_variance_strata, ratio_variance_total, ratio_variance_wo_n

__all__ = [
    "EstimationResult",
    "NumAtAgeEstimator",
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
