"""Text-to-number conversion for form fields.

The pricing core only ever sees finite floats. Anything a user can type is
mapped to a number here: the longest numeric prefix is used (``"12abc"`` ->
12.0) and empty, unparsable or non-finite text maps to a fallback.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import replace

from .config import DisplayConfig
from .types import PricingInputs

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

INPUT_FIELDS = ("S0", "Su", "Sd", "K", "rPct")


def _resolve_fallback(fallback: float | None, cfg: DisplayConfig | None) -> float:
    if fallback is not None:
        return float(fallback)
    return (cfg or DisplayConfig()).parse_fallback


def safe_parse_float(
    value: str | float | None,
    fallback: float | None = None,
    *,
    cfg: DisplayConfig | None = None,
) -> float:
    """Parse ``value`` like a form field, returning the fallback on failure.

    An explicit ``fallback`` wins over ``cfg.parse_fallback``.
    """
    fallback = _resolve_fallback(fallback, cfg)
    if value is None:
        return float(fallback)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        x = float(value)
    else:
        m = _NUMERIC_PREFIX.match(str(value))
        if m is None:
            return float(fallback)
        x = float(m.group(1))
    return x if math.isfinite(x) else float(fallback)


def inputs_from_text(
    fields: Mapping[str, str | float | None],
    *,
    fallback: float | None = None,
    cfg: DisplayConfig | None = None,
) -> PricingInputs:
    """Build :class:`PricingInputs` from raw field values.

    Missing keys take the fallback; unknown keys raise ``KeyError``.
    """
    fallback = _resolve_fallback(fallback, cfg)
    unknown = set(fields) - set(INPUT_FIELDS)
    if unknown:
        raise KeyError(f"Unknown input fields: {sorted(unknown)}")
    values = {
        name: safe_parse_float(fields.get(name), fallback) for name in INPUT_FIELDS
    }
    return PricingInputs(**values)


def update_inputs(
    inputs: PricingInputs,
    field: str,
    raw: str | float | None,
    *,
    fallback: float | None = None,
    cfg: DisplayConfig | None = None,
) -> PricingInputs:
    """Return a copy of ``inputs`` with one field replaced by its parsed value."""
    if field not in INPUT_FIELDS:
        raise KeyError(f"Unknown input field: {field!r}")
    return replace(inputs, **{field: safe_parse_float(raw, fallback, cfg=cfg)})
