"""
End-to-end number-at-age estimation for a haul-level (FO) sampling design.

Chains the estimation stages in the order the data flow up the RDBES
hierarchy:

    BV ─ num_at_age_bv ─ SA ─ HT ─ SS ─ census ─ FO ┐
    SA ─ total_weight_species_selection ─ census ─ FO ┴ ratio_wo_n ─ CL ─ total
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import polars as pl

from ..core.exceptions import ConfigurationError
from ..core.hierarchy import HierarchyLevel
from .age import num_at_age_bv
from .expansion import (
    num_at_age_haul_census,
    num_at_age_species_selection_ht,
    total_weight_haul_census,
    total_weight_species_selection,
)
from .ratio import ratio_wo_n
from .strata import ratio_estimate_strata, total_stratified

logger = logging.getLogger(__name__)

CONFIG_KEYS = {"min_age", "max_age", "parent_id", "landings_stratum"}


@dataclass
class EstimationResult:
    """Every intermediate relation of one estimation run."""

    sample_counts: pl.DataFrame
    species_selection_totals: pl.DataFrame
    haul_totals: pl.DataFrame
    species_selection_weights: pl.DataFrame
    haul_weights: pl.DataFrame
    ratios: pl.DataFrame
    strata_totals: pl.DataFrame
    total: pl.DataFrame


class NumAtAgeEstimator:
    """Estimate total number at age from RDBES tables.

    Parameters
    ----------
    tables : Mapping[str, pl.DataFrame]
        Input tables keyed by RDBES record type: BV, SA, SS, FO and CL.
    config : dict, optional
        Estimation options:

        - ``min_age``, ``max_age``: inclusive age range, derived from the
          age readings when omitted.
        - ``parent_id``: column of FO identifying the sampling scheme,
          default ``"SDid"``.
        - ``landings_stratum``: CL column to use as ``stratum`` when CL has
          no stratum column.
    """

    sample_unit_type = HierarchyLevel.FO

    def __init__(self, tables: Mapping[str, pl.DataFrame], config: Optional[dict] = None):
        self.tables = dict(tables)
        self.config = dict(config or {})
        self._validate_config()

        self.min_age = self.config.get("min_age")
        self.max_age = self.config.get("max_age")
        self.parent_id = self.config.get("parent_id", "SDid")
        self.landings_stratum = self.config.get("landings_stratum")

    def _validate_config(self) -> None:
        unknown = set(self.config) - CONFIG_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown config option(s): {sorted(unknown)}; "
                f"valid options are {sorted(CONFIG_KEYS)}"
            )

        for key in ("min_age", "max_age"):
            value = self.config.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigurationError(f"{key} must be an integer, got {value!r}")

        min_age, max_age = self.config.get("min_age"), self.config.get("max_age")
        if min_age is not None and max_age is not None and min_age > max_age:
            raise ConfigurationError(f"min_age ({min_age}) exceeds max_age ({max_age})")

    def get_required_tables(self) -> list[str]:
        return ["BV", "SA", "SS", self.sample_unit_type.value, "CL"]

    def _table(self, name: str) -> pl.DataFrame:
        try:
            return self.tables[name]
        except KeyError:
            raise ConfigurationError(
                f"Table {name!r} is required; provided tables: {sorted(self.tables)}"
            ) from None

    def _landings(self) -> pl.DataFrame:
        landings = self._table("CL")
        if self.landings_stratum and "stratum" not in landings.columns:
            if self.landings_stratum not in landings.columns:
                raise ConfigurationError(
                    f"landings_stratum column {self.landings_stratum!r} not in CL"
                )
            landings = landings.with_columns(
                pl.col(self.landings_stratum).alias("stratum")
            )
        return landings

    def estimate(self) -> EstimationResult:
        """Run every stage and return all intermediate results."""
        for name in self.get_required_tables():
            self._table(name)

        sa = self._table("SA")
        ss = self._table("SS")
        fo = self._table(self.sample_unit_type.value)

        logger.info("Tabulating ages")
        sample_counts = num_at_age_bv(self._table("BV"), self.min_age, self.max_age)

        logger.info("Expanding number at age to species selections and hauls")
        ss_totals = num_at_age_species_selection_ht(sa, sample_counts)
        haul_totals = num_at_age_haul_census(ss, ss_totals)

        logger.info("Totalling live weight per species selection and haul")
        ss_weights = total_weight_species_selection(sa)
        haul_weights = total_weight_haul_census(ss, ss_weights)

        logger.info("Estimating stratum ratios by %s", self.parent_id)
        ratios = ratio_wo_n(
            self.sample_unit_type, fo, haul_totals, haul_weights, self.parent_id
        )

        logger.info("Raising ratios with landings")
        strata_totals = ratio_estimate_strata(ratios, self._landings())
        total = total_stratified(strata_totals)

        return EstimationResult(
            sample_counts=sample_counts,
            species_selection_totals=ss_totals,
            haul_totals=haul_totals,
            species_selection_weights=ss_weights,
            haul_weights=haul_weights,
            ratios=ratios,
            strata_totals=strata_totals,
            total=total,
        )


def estimate_num_at_age(tables: Mapping[str, pl.DataFrame], **config) -> pl.DataFrame:
    """Estimate total number at age; see :class:`NumAtAgeEstimator`.

    Returns
    -------
    pl.DataFrame
        Columns age and numAtAge.
    """
    return NumAtAgeEstimator(tables, config).estimate().total
