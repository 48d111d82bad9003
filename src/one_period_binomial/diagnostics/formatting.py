from __future__ import annotations

from collections.abc import Mapping
from functools import partial

from ..config import DisplayConfig
from ..types import PricingResult


def format_currency(x: float, cfg: DisplayConfig | None = None) -> str:
    """``1.928`` -> ``"$1.93"`` (sign before the currency symbol)."""
    cfg = cfg or DisplayConfig()
    sign = "-" if x < 0 else ""
    return f"{sign}{cfg.currency}{abs(x):.{cfg.decimals}f}"


def result_summary(
    result: PricingResult, cfg: DisplayConfig | None = None
) -> dict[str, dict[str, str]]:
    """Headline value and payoff description for the call and the put cards."""
    fmt = partial(format_currency, cfg=cfg)
    return {
        "call": {
            "title": "Call Option Price (C₀)",
            "value": fmt(result.C0),
            "subtitle": "fair value of the call option at t=0",
            "description": (
                f"Payoffs: Up-state {fmt(result.Cu)}, Down-state {fmt(result.Cd)}"
            ),
        },
        "put": {
            "title": "Put Option Price (P₀)",
            "value": fmt(result.P0),
            "subtitle": "fair value of the put option at t=0",
            "description": (
                f"Payoffs: Up-state {fmt(result.Pu)}, Down-state {fmt(result.Pd)}"
            ),
        },
    }


def error_lines(errors: Mapping[str, str]) -> list[str]:
    """Bullet lines for the validation banner; empty when there is nothing to show."""
    if not errors:
        return []
    return ["Please correct the following:"] + [f"• {msg}" for msg in errors.values()]
