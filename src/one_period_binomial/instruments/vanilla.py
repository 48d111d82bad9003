"""Call and put payoffs at the two terminal nodes of a one-period tree."""

from __future__ import annotations

from dataclasses import dataclass

from ..types import OptionType


def call_payoff(S: float, K: float) -> float:
    return float(max(S - K, 0.0))


def put_payoff(S: float, K: float) -> float:
    return float(max(K - S, 0.0))


@dataclass(frozen=True, slots=True)
class VanillaPayoff:
    """Call/put payoff with a fixed strike."""

    kind: OptionType
    strike: float

    def __call__(self, S: float) -> float:
        if self.kind == OptionType.CALL:
            return call_payoff(S, K=self.strike)
        if self.kind == OptionType.PUT:
            return put_payoff(S, K=self.strike)
        raise ValueError(f"Unsupported option kind: {self.kind}")

    def at_nodes(self, Su: float, Sd: float) -> tuple[float, float]:
        """Payoffs ``(up, down)`` in the two terminal states."""
        return self(Su), self(Sd)
