from __future__ import annotations

import math
from dataclasses import dataclass

from .types import PricingInputs


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    decimals: int = 2
    currency: str = "$"
    parse_fallback: float = 0.0  # value used for empty / unparsable text

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError("decimals must be >= 0")
        if not math.isfinite(self.parse_fallback):
            raise ValueError("parse_fallback must be finite")


# Initial state of the calculator form
DEFAULT_INPUTS = PricingInputs(S0=40.0, Su=56.0, Sd=32.0, K=50.0, rPct=5.0)
