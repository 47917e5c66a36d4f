import math

from tradesim.simulator import round_money


def test_half_rounds_away_from_zero():
    assert round_money(1.005) == 1.01
    assert round_money(2.675) == 2.68
    assert round_money(-0.125) == -0.13
    assert round_money(-1.005) == -1.01
    assert round_money(0.125) == 0.13


def test_other_places():
    assert round_money(1.23456, 3) == 1.235
    assert round_money(19.999) == 20.0
    assert round_money(-10.404) == -10.4


def test_large_values_keep_their_magnitude():
    assert round_money(1.98e26) == 1.98e26
    assert round_money(1e30) == 1e30
    assert round_money(float(10**28)) == 1e28
    assert round_money(-1.5e300) == -1.5e300


def test_non_finite_values_pass_through():
    assert round_money(math.inf) == math.inf
    assert round_money(-math.inf) == -math.inf
    assert math.isnan(round_money(math.nan))
