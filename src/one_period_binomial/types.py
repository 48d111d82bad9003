from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OptionType(str, Enum):
    """Option contract type.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


class ErrorField(str, Enum):
    """Keys under which validation messages are reported.

    The first five mirror the fields of :class:`PricingInputs`; ``UP_DOWN`` and
    ``CURRENT_PRICE`` report relations between the three asset prices.
    """

    S0 = "S0"
    SU = "Su"
    SD = "Sd"
    K = "K"
    RATE_PCT = "rPct"
    UP_DOWN = "upDown"
    CURRENT_PRICE = "currentPrice"


# field key -> human-readable message; empty means valid
ValidationErrors = dict[str, str]


@dataclass(frozen=True, slots=True)
class PricingInputs:
    """Market inputs of a one-period binomial model.

    Parameters
    ----------
    S0 : float
        Current asset price.
    Su : float
        Asset price in the up state at the horizon.
    Sd : float
        Asset price in the down state at the horizon.
    K : float
        Strike price shared by the call and the put.
    rPct : float
        Simple risk-free rate for the single period, in percent.

    Notes
    -----
    The object is frozen; a field edit produces a new instance (see
    :func:`one_period_binomial.parsing.update_inputs`).
    """

    S0: float
    Su: float
    Sd: float
    K: float
    rPct: float

    @property
    def r(self) -> float:
        """Per-period rate as a decimal (``rPct / 100``)."""
        return self.rPct / 100.0

    def as_dict(self) -> dict[str, float]:
        return {
            "S0": self.S0,
            "Su": self.Su,
            "Sd": self.Sd,
            "K": self.K,
            "rPct": self.rPct,
        }


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Prices of the call and the put on a one-period tree.

    Parameters
    ----------
    Cu, Cd : float
        Call payoff in the up / down state.
    Pu, Pd : float
        Put payoff in the up / down state.
    C0, P0 : float
        Present values of the call and the put.
    p : float
        Risk-neutral probability of the up state.

    Notes
    -----
    ``p`` is not clipped. Inputs that pass validation can still combine with
    an extreme rate to give ``p`` outside ``[0, 1]``; see
    :attr:`is_arbitrage_free`. At ``p == 0`` or ``p == 1`` one state carries
    no weight and a position in the asset and the bond dominates; those
    endpoints are not treated as arbitrage-free.
    """

    Cu: float
    Cd: float
    Pu: float
    Pd: float
    C0: float
    P0: float
    p: float

    @property
    def is_arbitrage_free(self) -> bool:
        """True when ``0 < p < 1`` (both states strictly possible)."""
        return 0.0 < self.p < 1.0


@dataclass(frozen=True, slots=True)
class TimeSeriesPoint:
    """One x-axis position of a tree chart.

    ``up`` and ``down`` are ``None`` on spacer points (blank labels).
    """

    label: str
    up: float | None
    down: float | None
