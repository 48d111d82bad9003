import warnings

import pytest

from one_period_binomial import evaluate, price, project_series


def test_valid_inputs_produce_result_and_series(canonical):
    ev = evaluate(canonical)

    assert ev.ok
    assert ev.errors == {}
    assert ev.result == price(canonical)
    assert ev.series == project_series(canonical, ev.result)


def test_invalid_inputs_produce_errors_only(make_inputs):
    ev = evaluate(make_inputs(Su=32.0, Sd=32.0))

    assert not ev.ok
    assert "upDown" in ev.errors
    assert ev.result is None
    assert ev.series is None


def test_equal_states_never_reach_pricer(make_inputs, monkeypatch):
    import one_period_binomial.evaluation as evaluation

    def _boom(_):
        raise AssertionError("price called on invalid inputs")

    monkeypatch.setattr(evaluation, "price", _boom)
    ev = evaluation.evaluate(make_inputs(Su=40.0, Sd=40.0))
    assert ev.result is None


def test_out_of_bounds_probability_warns_but_keeps_result(make_inputs):
    p = make_inputs(rPct=50.0)
    with pytest.warns(RuntimeWarning, match="Risk-neutral probability"):
        ev = evaluate(p)
    assert ev.result == price(p)


def test_no_warning_in_normal_case(canonical):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        evaluate(canonical)


def test_last_input_wins(make_inputs):
    first = evaluate(make_inputs(K=45.0))
    second = evaluate(make_inputs(K=55.0))
    assert first.result != second.result
    assert evaluate(make_inputs(K=45.0)).result == first.result
