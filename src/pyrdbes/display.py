"""
Rich rendering of estimation results.
"""

from __future__ import annotations

from typing import Optional

import polars as pl
from rich.console import Console
from rich.table import Table


def display_estimate(
    df: pl.DataFrame,
    title: str = "",
    max_rows: int = 20,
    precision: int = 2,
    console: Optional[Console] = None,
) -> None:
    """
    Format and display an estimation result using Rich tables.

    Parameters
    ----------
    df : pl.DataFrame
        Any result relation, e.g. the output of ``total_stratified``.
    title : str, optional
        Title to display above the table.
    max_rows : int, optional
        Maximum rows to display. Defaults to 20.
    precision : int, optional
        Decimal places for floating point numbers. Defaults to 2.
    console : rich.console.Console, optional
        Console to print to. A new one is created when omitted.

    Example
    -------
    >>> total = estimate_num_at_age(tables)
    >>> display_estimate(total, title="Number at age")
    """
    console = console or Console()

    if title:
        console.print(f"\n[bold blue]{title}[/bold blue]")

    table = Table(show_header=True, header_style="bold cyan")
    for col in df.columns:
        table.add_column(col, justify="right" if df[col].dtype.is_numeric() else "left")

    for row in df.head(max_rows).iter_rows():
        formatted_row = []
        for val in row:
            if val is None:
                formatted_row.append("-")
            elif isinstance(val, float):
                formatted_row.append(f"{val:,.{precision}f}")
            elif isinstance(val, int):
                formatted_row.append(f"{val:,}")
            else:
                formatted_row.append(str(val))
        table.add_row(*formatted_row)

    console.print(table)

    if len(df) > max_rows:
        console.print(f"[dim]... showing {max_rows} of {len(df)} rows[/dim]")
