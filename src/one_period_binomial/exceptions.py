from __future__ import annotations

from collections.abc import Mapping


class InvalidInputsError(ValueError):
    """Raised when pricing inputs fail one or more validation rules.

    This error is raised by :func:`~one_period_binomial.validation.require_valid`
    for callers that prefer an exception over inspecting the mapping returned
    by :func:`~one_period_binomial.validation.validate`.

    Attributes
    ----------
    errors : dict[str, str]
        Every active message, keyed by field (``S0``, ``Su``, ``Sd``, ``K``,
        ``rPct``, ``upDown``, ``currentPrice``).
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(f"Invalid pricing inputs ({detail})")
