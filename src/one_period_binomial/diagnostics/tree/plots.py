from __future__ import annotations

import numpy as np

from ...projection import T0_LABEL, Series, is_spacer, project_series
from ...types import OptionType, PricingInputs, PricingResult
from .._mpl import get_plt, pretty_ax

UP_COLOR = "#059669"
DOWN_COLOR = "#dc2626"

TITLES = (
    "Asset Price Evolution",
    "Call Option Valuation",
    "Put Option Valuation",
)


def chart_description(series: Series, *, kind: OptionType | None = None) -> str:
    """One-sentence text alternative for a tree chart.

    ``kind=None`` describes the asset series; a call or put describes option
    values, whose t=1 points are payoffs.
    """
    t0, t1 = (pt for pt in series if not is_spacer(pt))
    if kind is None:
        noun, t1_prefix = "asset price evolution", ""
    else:
        noun, t1_prefix = f"{OptionType(kind).value} option values", "payoffs of "
    return (
        f"Line chart showing {noun} from ${t0.up:.2f} at t=0 to "
        f"{t1_prefix}${t1.up:.2f} (up-state) or ${t1.down:.2f} (down-state) at t=1"
    )


def plot_tree_series(ax, series: Series, *, title: str, decimals: int = 2):
    """Draw one series as Up/Down lines; spacer points get no marker or label."""
    x = np.arange(len(series))
    up = np.array([np.nan if pt.up is None else pt.up for pt in series], dtype=float)
    down = np.array(
        [np.nan if pt.down is None else pt.down for pt in series], dtype=float
    )

    ax.plot(x, up, color=UP_COLOR, lw=2, label="Up Path")
    ax.plot(x, down, color=DOWN_COLOR, lw=2, label="Down Path")

    for xi, pt in zip(x, series):
        if is_spacer(pt):
            continue
        # t=0 sits where both lines meet; lift its label clear of them
        dy = 18 if pt.label == T0_LABEL else 8
        for val, color in ((pt.up, UP_COLOR), (pt.down, DOWN_COLOR)):
            if val is None or not np.isfinite(val):
                continue
            ax.plot([xi], [val], marker="o", ms=6, color=color, ls="none")
            ax.annotate(
                f"{val:.{decimals}f}",
                (xi, val),
                xytext=(6, dy),
                textcoords="offset points",
                fontsize=10,
                fontweight="bold",
                color=color,
            )

    ax.set_xticks(x)
    ax.set_xticklabels([pt.label for pt in series])
    ax.set_xlim(-0.25, len(series) - 0.75)
    ax.set_title(title)
    ax.legend()
    pretty_ax(ax)
    return ax


def plot_price_trees(
    inputs: PricingInputs,
    result: PricingResult,
    *,
    decimals: int = 2,
    figsize=(8, 12),
):
    """Plot asset, call and put trees stacked vertically."""
    series = project_series(inputs, result)

    plt = get_plt()
    fig, axes = plt.subplots(3, 1, figsize=figsize, constrained_layout=True)

    for ax, s, title in zip(axes, series, TITLES):
        plot_tree_series(ax, s, title=title, decimals=decimals)

    return fig, tuple(axes)
