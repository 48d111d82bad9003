"""one_period_binomial.instruments

Instrument payoffs ("what is being priced"), independent of the tree model.
"""

from .vanilla import VanillaPayoff, call_payoff, put_payoff

__all__ = ["VanillaPayoff", "call_payoff", "put_payoff"]
