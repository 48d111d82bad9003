from __future__ import annotations

from ..types import PricingInputs, PricingResult


def discounted_strike(p: PricingInputs) -> float:
    """K / (1 + r), the strike discounted over the single period."""
    return p.K / (1.0 + p.r)


def forward_discounted(p: PricingInputs) -> float:
    """S0 - K/(1 + r) (the RHS of put-call parity)."""
    return p.S0 - discounted_strike(p)


def put_call_parity_residual(result: PricingResult, p: PricingInputs) -> float:
    """
    Residual = (C0 - P0) - (S0 - K/(1 + r)).
    Should be ~0 for every validated input.
    """
    return (result.C0 - result.P0) - forward_discounted(p)
