from __future__ import annotations

from dataclasses import dataclass

from ..types import PricingInputs


@dataclass(frozen=True, slots=True)
class OnePeriodModel:
    S0: float  # current asset price
    Su: float  # up-state price
    Sd: float  # down-state price
    r: float  # simple rate for the period (decimal)

    @classmethod
    def from_inputs(cls, p: PricingInputs) -> OnePeriodModel:
        return cls(S0=p.S0, Su=p.Su, Sd=p.Sd, r=p.r)

    @property
    def growth(self) -> float:
        # one-period accumulation factor
        return 1.0 + self.r

    @property
    def p_star(self) -> float:
        # not range-checked; see PricingResult.is_arbitrage_free
        return (self.growth * self.S0 - self.Sd) / (self.Su - self.Sd)

    def discounted_expectation(self, up: float, down: float) -> float:
        p = self.p_star
        return (p * up + (1.0 - p) * down) / self.growth
