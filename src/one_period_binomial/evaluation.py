"""Validate-then-price pipeline used by presentation code.

:func:`evaluate` is the single entry point a form should call after every
edit. It never prices inputs that fail validation, so an
:class:`Evaluation` holds either errors or a result, never both.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from .pricers.one_period import price
from .projection import Series, project_series
from .types import PricingInputs, PricingResult, ValidationErrors
from .validation import validate


@dataclass(frozen=True, slots=True)
class Evaluation:
    inputs: PricingInputs
    errors: ValidationErrors
    result: PricingResult | None = None
    series: tuple[Series, Series, Series] | None = None

    @property
    def ok(self) -> bool:
        return not self.errors


def evaluate(inputs: PricingInputs) -> Evaluation:
    """Run validation, pricing and projection for one set of inputs.

    Warns with ``RuntimeWarning`` when the risk-neutral probability is not
    strictly inside ``(0, 1)``; the result is returned unchanged.
    """
    errors = validate(inputs)
    if errors:
        return Evaluation(inputs=inputs, errors=errors)

    result = price(inputs)
    if not result.is_arbitrage_free:
        warnings.warn(
            f"Risk-neutral probability not in (0, 1): p={result.p:.6g}. "
            "Prices are not arbitrage-free for this rate.",
            RuntimeWarning,
            stacklevel=2,
        )
    return Evaluation(
        inputs=inputs,
        errors={},
        result=result,
        series=project_series(inputs, result),
    )
