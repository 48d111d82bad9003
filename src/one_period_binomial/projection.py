"""Chart-ready series for the asset, call and put trees.

Each series has four points: a leading spacer, ``t = 0``, ``t = 1`` and a
trailing spacer. Spacers only give a chart horizontal margin; they carry
``None`` in both channels and their labels are blank so that category axes
keep them distinct.
"""

from __future__ import annotations

from .types import PricingInputs, PricingResult, TimeSeriesPoint

LEADING_SPACER = " "
TRAILING_SPACER = "  "
T0_LABEL = "t = 0"
T1_LABEL = "t = 1"

Series = tuple[TimeSeriesPoint, ...]


def is_spacer(point: TimeSeriesPoint) -> bool:
    """True for points whose label is blank or whitespace only."""
    return not point.label.strip()


def _series(x0: float, xu: float, xd: float) -> Series:
    return (
        TimeSeriesPoint(label=LEADING_SPACER, up=None, down=None),
        TimeSeriesPoint(label=T0_LABEL, up=x0, down=x0),
        TimeSeriesPoint(label=T1_LABEL, up=xu, down=xd),
        TimeSeriesPoint(label=TRAILING_SPACER, up=None, down=None),
    )


def project_series(
    inputs: PricingInputs, result: PricingResult
) -> tuple[Series, Series, Series]:
    """Return ``(asset, call, put)`` series for a priced tree."""
    asset = _series(inputs.S0, inputs.Su, inputs.Sd)
    call = _series(result.C0, result.Cu, result.Cd)
    put = _series(result.P0, result.Pu, result.Pd)
    return asset, call, put


def data_points(series: Series) -> Series:
    """Drop spacer points."""
    return tuple(pt for pt in series if not is_spacer(pt))
