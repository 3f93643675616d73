from decimal import Decimal

import pytest

from moneytree.errors import InvalidArgument
from moneytree.slippage import bps_to_percent, min_acceptable, min_acceptable_bps, tolerance_to_bps


def test_one_percent_of_a_thousand():
    assert min_acceptable(1000, 1) == 990


@pytest.mark.parametrize("amount", [0, 1, 999, 10**18, 2**256 - 1])
def test_bounds(amount):
    assert min_acceptable(amount, 0) == amount
    assert min_acceptable(amount, 100) == 0
    for tolerance in (1, "0.5", Decimal("33.33"), 50):
        assert 0 <= min_acceptable(amount, tolerance) <= amount


def test_result_is_floored():
    # 999 * 9900 / 10000 = 989.01
    assert min_acceptable(999, 1) == 989
    assert min_acceptable_bps(1, 1) == 0


def test_tolerance_to_bps():
    assert tolerance_to_bps("1.23") == 123
    assert tolerance_to_bps("0.01") == 1
    assert tolerance_to_bps(0.1) == 10
    assert tolerance_to_bps(" 50 ") == 5000


@pytest.mark.parametrize("tolerance", [-1, "-0.01", 100.5, "101", "abc", "", "nan", True, None])
def test_invalid_tolerance(tolerance):
    with pytest.raises(InvalidArgument):
        min_acceptable(1000, tolerance)


@pytest.mark.parametrize("amount", [-1, 1.5, "1000", True])
def test_invalid_amount(amount):
    with pytest.raises(InvalidArgument):
        min_acceptable(amount, 1)


def test_invalid_bps():
    with pytest.raises(InvalidArgument):
        min_acceptable_bps(1000, 10_001)
    with pytest.raises(InvalidArgument):
        min_acceptable_bps(1000, 1.0)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        tolerance_to_bps("lots")


def test_bps_to_percent():
    assert bps_to_percent(150) == "1.5"
    assert bps_to_percent(100) == "1"
    assert bps_to_percent(5) == "0.05"
    assert bps_to_percent(0) == "0"
    assert bps_to_percent(2000) == "20"


@pytest.mark.parametrize("tolerance", ["0.009", "1.239", 0.001])
def test_sub_basis_point_tolerance_is_rejected(tolerance):
    with pytest.raises(InvalidArgument, match="two decimal places"):
        tolerance_to_bps(tolerance)


@pytest.mark.parametrize("tolerance", ["0.01", "1", "99.99"])
def test_any_nonzero_tolerance_lowers_a_positive_amount(tolerance):
    assert min_acceptable(10**18, tolerance) < 10**18
