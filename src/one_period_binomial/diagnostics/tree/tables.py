from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd

from ...config import DisplayConfig
from ...projection import Series, data_points, project_series
from ...types import PricingInputs, PricingResult
from ..formatting import format_currency

COLUMNS = ["Time Period", "Up Path", "Down Path"]

ASSET_ROWS = {"t = 0": "t = 0 (Current)", "t = 1": "t = 1 (Expiration)"}
OPTION_ROWS = {"t = 0": "t = 0 (Option Price)", "t = 1": "t = 1 (Payoffs)"}


def series_frame(
    series: Series, *, row_labels: Mapping[str, str] | None = None
) -> pd.DataFrame:
    """Tabulate the data points of one series (spacers dropped).

    ``row_labels`` maps point labels to the text shown in ``Time Period``.
    """
    row_labels = row_labels or {}
    rows = [
        (
            row_labels.get(pt.label, pt.label),
            np.nan if pt.up is None else float(pt.up),
            np.nan if pt.down is None else float(pt.down),
        )
        for pt in data_points(series)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def tree_tables(
    inputs: PricingInputs, result: PricingResult
) -> dict[str, pd.DataFrame]:
    """Asset, call and put node tables keyed by their titles."""
    asset, call, put = project_series(inputs, result)
    return {
        "Asset Price Evolution": series_frame(asset, row_labels=ASSET_ROWS),
        "Call Option Values": series_frame(call, row_labels=OPTION_ROWS),
        "Put Option Values": series_frame(put, row_labels=OPTION_ROWS),
    }


def format_frame(df: pd.DataFrame, cfg: DisplayConfig | None = None) -> pd.DataFrame:
    """Currency-format the value columns of a node table."""
    out = df.copy()
    for col in ("Up Path", "Down Path"):
        out[col] = out[col].map(lambda x: format_currency(float(x), cfg))
    return out
