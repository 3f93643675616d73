import pytest

from moneytree.errors import InvalidArgument, RemoteCallFailure
from moneytree.token import MoneytreeToken, validate_tax_rate

from .conftest import OTHER, OWNER, ROUTER, TOKEN, FakeContract, FakeWallet


def _token(**returns):
    contract = FakeContract(**returns)
    wallet = FakeWallet({TOKEN: contract})
    return MoneytreeToken(wallet, TOKEN), contract, wallet


@pytest.mark.parametrize("value, expected", [("0", 0), (" 150 ", 150), (2000, 2000)])
def test_validate_tax_rate(value, expected):
    assert validate_tax_rate(value) == expected


@pytest.mark.parametrize("value", ["-1", "2001", "1.5", "abc", ""])
def test_validate_tax_rate_rejects(value):
    with pytest.raises(InvalidArgument):
        validate_tax_rate(value)


def test_reads():
    token, contract, _ = _token(decimals=9, owner=OWNER, taxRate=250, swapEnabled=True, balanceOf=5)

    assert token.decimals() == 9
    assert token.decimals() == 9
    assert token.owner() == OWNER
    assert token.tax_rate() == 250
    assert token.swap_enabled() is True
    assert token.balance_of(OWNER) == 5
    assert [name for name, _ in contract.calls].count("decimals") == 1


def test_ensure_allowance_approves_the_exact_shortfall_amount():
    token, _, wallet = _token(allowance=10)

    assert token.ensure_allowance(ROUTER, 500) is True
    assert wallet.sent == [("approve", (ROUTER, 500), 0, None)]


def test_ensure_allowance_skips_when_sufficient():
    token, _, wallet = _token(allowance=500)

    assert token.ensure_allowance(ROUTER, 500) is False
    assert wallet.sent == []


def test_failed_approval_raises():
    token, _, wallet = _token(allowance=0)
    wallet.outcomes["approve"] = [{"status": 0}]

    with pytest.raises(RemoteCallFailure):
        token.ensure_allowance(ROUTER, 1)


def test_admin_writes():
    token, _, wallet = _token()

    token.set_tax_rate(300)
    token.set_tax_collector(OTHER)
    token.set_tax_exemption(OTHER, False)
    token.set_swap_enabled(True)
    token.renounce_ownership()
    token.emergency_withdraw_eth()

    assert [(name, args) for name, args, _, _ in wallet.sent] == [
        ("setTaxRate", (300,)),
        ("setTaxCollector", (OTHER,)),
        ("setTaxExemption", (OTHER, False)),
        ("setSwapEnabled", (True,)),
        ("renounceOwnership", ()),
        ("emergencyWithdrawETH", ()),
    ]


def test_tax_rate_is_validated_before_sending():
    token, _, wallet = _token()
    with pytest.raises(InvalidArgument):
        token.set_tax_rate(5000)
    assert wallet.sent == []
