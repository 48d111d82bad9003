from __future__ import annotations

from ..instruments.vanilla import VanillaPayoff
from ..models.one_period import OnePeriodModel
from ..types import OptionType, PricingInputs, PricingResult


def price_option(
    model: OnePeriodModel, payoff: VanillaPayoff
) -> tuple[float, float, float]:
    """
    Price one vanilla payoff on the two-state tree.

    Returns ``(up_payoff, down_payoff, present_value)``.
    """
    up, down = payoff.at_nodes(model.Su, model.Sd)
    return up, down, model.discounted_expectation(up, down)


def price(p: PricingInputs) -> PricingResult:
    """
    Call and put prices for validated inputs.

    The caller must have checked that ``validate(p)`` is empty; ``Su == Sd``
    divides by zero here.
    """
    model = OnePeriodModel.from_inputs(p)

    call = VanillaPayoff(kind=OptionType.CALL, strike=p.K)
    put = VanillaPayoff(kind=OptionType.PUT, strike=p.K)
    Cu, Cd, C0 = price_option(model, call)
    Pu, Pd, P0 = price_option(model, put)

    return PricingResult(Cu=Cu, Cd=Cd, Pu=Pu, Pd=Pd, C0=C0, P0=P0, p=model.p_star)
