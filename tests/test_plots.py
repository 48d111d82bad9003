import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from one_period_binomial import OptionType, price, project_series  # noqa: E402
from one_period_binomial.diagnostics.tree import (  # noqa: E402
    chart_description,
    plot_price_trees,
)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_price_trees_layout(canonical):
    fig, axes = plot_price_trees(canonical, price(canonical))

    assert len(axes) == 3
    assert [ax.get_title() for ax in axes] == [
        "Asset Price Evolution",
        "Call Option Valuation",
        "Put Option Valuation",
    ]
    labels = [t.get_text() for t in axes[0].get_xticklabels()]
    assert labels == [" ", "t = 0", "t = 1", "  "]


def test_annotations_skip_spacers(canonical):
    _, axes = plot_price_trees(canonical, price(canonical))
    texts = sorted(a.get_text() for a in axes[0].texts)
    # two channels at t=0 and t=1, nothing for the spacers
    assert texts == ["32.00", "40.00", "40.00", "56.00"]


def test_chart_description(canonical):
    asset, call, put = project_series(canonical, price(canonical))
    assert chart_description(asset) == (
        "Line chart showing asset price evolution from $40.00 at t=0 to "
        "$56.00 (up-state) or $32.00 (down-state) at t=1"
    )
    assert chart_description(call, kind=OptionType.CALL) == (
        "Line chart showing call option values from $2.38 at t=0 to "
        "payoffs of $6.00 (up-state) or $0.00 (down-state) at t=1"
    )
    assert chart_description(put, kind=OptionType.PUT) == (
        "Line chart showing put option values from $10.00 at t=0 to "
        "payoffs of $0.00 (up-state) or $18.00 (down-state) at t=1"
    )
