"""
Variance of the stratified ratio estimator.

Placeholders for the variance of each stage of the ratio estimation chain:
the stratum ratios (:func:`~pyrdbes.estimation.ratio.ratio_wo_n`), the
stratum totals (:func:`~pyrdbes.estimation.strata.ratio_estimate_strata`)
and the grand total (:func:`~pyrdbes.estimation.strata.total_stratified`).
No variance formula has been settled yet, so they raise.
"""

from __future__ import annotations


def ratio_variance_wo_n(*args, **kwargs):
    """Variance of the stratum ratios of number at age to weight."""
    raise NotImplementedError("Variance of the stratum ratios is not implemented")


def ratio_variance_strata(*args, **kwargs):
    """Variance of the stratum totals of number at age."""
    raise NotImplementedError("Variance of the stratum totals is not implemented")


def ratio_variance_total(*args, **kwargs):
    """Variance of the grand total of number at age."""
    raise NotImplementedError("Variance of the grand total is not implemented")
