#!/usr/bin/env python3
"""
Number at Age by Stratum
========================

This example runs the full ratio estimation chain on a small synthetic
data set: two fishing-operation strata sampled under one sampling scheme,
one species (cod) and age readings from three samples.

How This Script Works
---------------------
1. Builds the BV, SA, SS, FO and CL tables as polars DataFrames
2. Runs NumAtAgeEstimator with an explicit age range
3. Shows the stratum ratios, the stratum totals and the grand total

Usage
-----
    python examples/number_at_age_by_stratum.py
"""

import logging

import polars as pl
from rich.console import Console
from rich.logging import RichHandler

from pyrdbes import NumAtAgeEstimator, display_estimate

console = Console()

COD = 126436


def build_tables() -> dict[str, pl.DataFrame]:
    bv = pl.DataFrame(
        {
            "SAid": [1, 1, 1, 2, 2, 3, 3, 3],
            "BVtype": ["Age"] * 8,
            "BVstratification": ["N"] * 8,
            "BVvalue": ["2", "2", "3", "3", "4", "2", "4", "4"],
        }
    )
    sa = pl.DataFrame(
        {
            "SSid": [10, 11, 12],
            "SAid": [1, 2, 3],
            "SAinclusionProb": [0.5, 1.0, 0.25],
            "SAstratification": ["N", "N", "N"],
            "SAspeciesCode": [COD, COD, COD],
            "SAtotalWeightLive": [20.0, 10.0, 40.0],
        }
    )
    ss = pl.DataFrame(
        {
            "SSid": [10, 11, 12],
            "FOid": [100, 101, 102],
            "SSselectionMethod": ["CENSUS"] * 3,
        }
    )
    fo = pl.DataFrame(
        {
            "FOid": [100, 101, 102],
            "SDid": [1, 1, 1],
            "FOstratification": ["Y", "Y", "Y"],
            "FOstratumName": ["North", "North", "South"],
            "FOclustering": ["N", "N", "N"],
        }
    )
    cl = pl.DataFrame(
        {
            "CLarea": ["North", "North", "South"],
            "CLofficialWeight": [2.0, 1.0, 4.0],
        }
    )
    return {"BV": bv, "SA": sa, "SS": ss, "FO": fo, "CL": cl}


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(message)s", handlers=[RichHandler(console=console)]
    )

    estimator = NumAtAgeEstimator(
        build_tables(), {"min_age": 1, "max_age": 5, "landings_stratum": "CLarea"}
    )
    result = estimator.estimate()

    display_estimate(
        result.ratios, title="Number per kg by stratum", precision=4, console=console
    )
    display_estimate(result.strata_totals, title="Number at age by stratum", console=console)
    display_estimate(result.total, title="Total number at age", console=console)


if __name__ == "__main__":
    main()
