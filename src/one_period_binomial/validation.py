"""Admissibility checks for one-period binomial inputs.

Every rule runs on every call; a single set of inputs can collect several
messages at once. :func:`validate` never raises.
"""

from __future__ import annotations

import math

from .exceptions import InvalidInputsError
from .types import ErrorField, PricingInputs, ValidationErrors

MESSAGES: dict[str, str] = {
    ErrorField.S0.value: "Current asset price must be greater than 0",
    ErrorField.SU.value: "Up-state price must be greater than 0",
    ErrorField.SD.value: "Down-state price must be greater than 0",
    ErrorField.K.value: "Strike price cannot be negative",
    ErrorField.RATE_PCT.value: "Risk-free rate must be greater than -100%",
    ErrorField.UP_DOWN.value: "Up-state price must exceed down-state price",
    ErrorField.CURRENT_PRICE.value: (
        "Current price should lie between down-state and up-state prices"
    ),
}


def _positive(x: float) -> bool:
    return math.isfinite(x) and x > 0.0


def validate(inputs: PricingInputs) -> ValidationErrors:
    """Return field key -> message for every violated rule.

    An empty dict means the inputs may be passed to
    :func:`one_period_binomial.pricers.one_period.price`.
    """
    errors: ValidationErrors = {}

    def flag(field: ErrorField) -> None:
        errors[field.value] = MESSAGES[field.value]

    S0, Su, Sd = inputs.S0, inputs.Su, inputs.Sd

    if not _positive(S0):
        flag(ErrorField.S0)
    if not _positive(Su):
        flag(ErrorField.SU)
    if not _positive(Sd):
        flag(ErrorField.SD)
    if not math.isfinite(inputs.K) or inputs.K < 0.0:
        flag(ErrorField.K)
    if not math.isfinite(inputs.rPct) or inputs.r <= -1.0:
        flag(ErrorField.RATE_PCT)

    if _positive(Su) and _positive(Sd) and Su <= Sd:
        flag(ErrorField.UP_DOWN)
    if _positive(S0) and _positive(Su) and _positive(Sd):
        if not (Sd < S0 < Su):
            flag(ErrorField.CURRENT_PRICE)

    return errors


def is_valid(inputs: PricingInputs) -> bool:
    return not validate(inputs)


def require_valid(inputs: PricingInputs) -> PricingInputs:
    """Return ``inputs`` unchanged, or raise with every active message."""
    errors = validate(inputs)
    if errors:
        raise InvalidInputsError(errors)
    return inputs
