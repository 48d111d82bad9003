"""
one_period_binomial

Single-period binomial pricing of a European call and put.

The main entrypoints are re-exported at the top level:

    from one_period_binomial import PricingInputs, validate, price, project_series
"""

from .config import DEFAULT_INPUTS, DisplayConfig
from .evaluation import Evaluation, evaluate
from .exceptions import InvalidInputsError
from .market.parity import put_call_parity_residual
from .pricers.one_period import price
from .projection import is_spacer, project_series
from .types import (
    ErrorField,
    OptionType,
    PricingInputs,
    PricingResult,
    TimeSeriesPoint,
    ValidationErrors,
)
from .validation import require_valid, validate

__all__ = [
    # Types
    "OptionType",
    "ErrorField",
    "PricingInputs",
    "PricingResult",
    "TimeSeriesPoint",
    "ValidationErrors",
    "InvalidInputsError",
    # Config
    "DisplayConfig",
    "DEFAULT_INPUTS",
    # Core
    "validate",
    "require_valid",
    "price",
    "project_series",
    "is_spacer",
    "evaluate",
    "Evaluation",
    "put_call_parity_residual",
]
