"""Pytest helpers for the one_period_binomial library."""

from __future__ import annotations

import pytest

from one_period_binomial.types import PricingInputs


@pytest.fixture
def base_params() -> dict:
    """The calculator's initial form state."""
    return {"S0": 40.0, "Su": 56.0, "Sd": 32.0, "K": 50.0, "rPct": 5.0}


@pytest.fixture
def canonical(base_params) -> PricingInputs:
    return PricingInputs(**base_params)


@pytest.fixture
def make_inputs(base_params):
    """Factory fixture: canonical inputs with selected fields overridden."""

    def _make(**overrides: float) -> PricingInputs:
        return PricingInputs(**{**base_params, **overrides})

    return _make
