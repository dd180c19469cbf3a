"""Tests for number rounding/formatting helpers."""

import math

from entitysight.utils.math_helpers import fixed, format_fixed, format_number, round_half_up


def test_format_number_drops_integral_fraction():
    assert format_number(2.0) == "2"
    assert format_number(-15.0) == "-15"
    assert format_number(3.5) == "3.5"


def test_format_number_special_values():
    assert format_number(-0.0) == "0"
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


def test_fixed_rounds_ties_away_from_zero():
    assert fixed(0.125, 2) == 0.13
    assert fixed(-0.125, 2) == -0.13
    assert fixed(2.5, 0) == 3.0


def test_format_fixed_three_decimals():
    assert format_fixed(1.23456, 3) == "1.235"
    assert format_fixed(2.0, 3) == "2"
    assert format_fixed(1.0001, 3) == "1"
    assert format_fixed(-0.0001, 3) == "0"


def test_fixed_passes_nan_through():
    assert format_fixed(math.nan, 3) == "NaN"


def test_round_half_up():
    assert round_half_up(127.5) == 128
    assert round_half_up(0.5) == 1
    assert round_half_up(-0.5) == 0
    assert round_half_up(254.49) == 254


def test_fixed_leaves_huge_values_alone():
    assert fixed(1e30, 3) == 1e30
    assert fixed(-1e26, 3) == -1e26
    assert format_fixed(1e30, 3) == "1e+30"
    assert format_fixed(123456789012345678.9, 3) == "123456789012345680"


def test_format_number_exponents_match_host():
    assert format_number(1e-7) == "1e-7"
    assert format_number(2.5e-8) == "2.5e-8"
    assert format_number(1e-6) == "0.000001"
    assert format_number(1.5e-5) == "0.000015"
    assert format_number(1e21) == "1e+21"
    assert format_number(-1.25e30) == "-1.25e+30"


def test_round_half_up_passes_non_finite_through():
    assert math.isnan(round_half_up(math.nan))
    assert round_half_up(math.inf) == math.inf
