import math

import pytest

from one_period_binomial import DEFAULT_INPUTS, DisplayConfig, PricingInputs
from one_period_binomial.parsing import (
    inputs_from_text,
    safe_parse_float,
    update_inputs,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("40", 40.0),
        ("  12.5", 12.5),
        ("-3", -3.0),
        ("+7", 7.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e2", 100.0),
        ("12abc", 12.0),
        ("3.14.15", 3.14),
        (42, 42.0),
        (2.5, 2.5),
    ],
)
def test_safe_parse_float_numeric_prefix(raw, expected):
    assert safe_parse_float(raw) == expected


@pytest.mark.parametrize(
    "raw", ["", "   ", "abc", "-", ".", None, "Infinity", math.inf, math.nan, "1e999"]
)
def test_safe_parse_float_falls_back(raw):
    assert safe_parse_float(raw) == 0.0
    assert safe_parse_float(raw, fallback=7.0) == 7.0


def test_inputs_from_text_uses_fallback_for_missing_fields():
    p = inputs_from_text({"S0": "40", "Su": "56", "Sd": "32", "K": ""})
    assert p == PricingInputs(S0=40.0, Su=56.0, Sd=32.0, K=0.0, rPct=0.0)


def test_inputs_from_text_rejects_unknown_field():
    with pytest.raises(KeyError):
        inputs_from_text({"sigma": "0.2"})


def test_update_inputs_replaces_one_field():
    p = update_inputs(DEFAULT_INPUTS, "K", "55")
    assert p.K == 55.0
    assert (p.S0, p.Su, p.Sd, p.rPct) == (40.0, 56.0, 32.0, 5.0)
    assert DEFAULT_INPUTS.K == 50.0


def test_update_inputs_bad_text_becomes_fallback():
    p = update_inputs(DEFAULT_INPUTS, "S0", "oops")
    assert p.S0 == 0.0


def test_update_inputs_unknown_field():
    with pytest.raises(KeyError):
        update_inputs(DEFAULT_INPUTS, "r", "5")


def test_configured_fallback_reaches_inputs_from_text():
    cfg = DisplayConfig(parse_fallback=7.0)
    p = inputs_from_text({"S0": "oops", "Su": "56"}, cfg=cfg)
    assert p.S0 == 7.0
    assert p.Su == 56.0
    assert (p.Sd, p.K, p.rPct) == (7.0, 7.0, 7.0)


def test_configured_fallback_reaches_update_inputs():
    cfg = DisplayConfig(parse_fallback=1.5)
    assert update_inputs(DEFAULT_INPUTS, "K", "", cfg=cfg).K == 1.5


def test_explicit_fallback_wins_over_config():
    cfg = DisplayConfig(parse_fallback=7.0)
    assert safe_parse_float("oops", 3.0, cfg=cfg) == 3.0
    assert safe_parse_float("oops", cfg=cfg) == 7.0


def test_as_dict_feeds_back_into_parser():
    assert inputs_from_text(DEFAULT_INPUTS.as_dict()) == DEFAULT_INPUTS
