from types import SimpleNamespace

import pytest
from web3.exceptions import TimeExhausted

from moneytree.chain import PendingTx, Wallet, checksum, format_units, is_zero_address, parse_units
from moneytree.errors import ConfigError, InvalidArgument, RemoteCallFailure

from .conftest import OTHER, OWNER


@pytest.mark.parametrize("text, decimals, expected", [
    ("1", 18, 10**18),
    ("1.5", 18, 15 * 10**17),
    (" 0.000001 ", 6, 1),
    ("1e3", 18, 1000 * 10**18),
    ("1000000", 18, 10**24),
    ("115792089237316195423570985008687907853269984665640564039457.584007913129639935", 18, 2**256 - 1),
])
def test_parse_units(text, decimals, expected):
    assert parse_units(text, decimals) == expected


@pytest.mark.parametrize("text, decimals", [
    ("0", 18), ("-1", 18), ("abc", 18), ("", 18), ("inf", 18), ("1.0000001", 6),
])
def test_parse_units_rejects(text, decimals):
    with pytest.raises(InvalidArgument):
        parse_units(text, decimals)


@pytest.mark.parametrize("amount, decimals, expected", [
    (15 * 10**17, 18, "1.5"),
    (10**18, 18, "1"),
    (0, 18, "0"),
    (1, 18, "0.000000000000000001"),
    (123, 0, "123"),
    (2**256 - 1, 18, "115792089237316195423570985008687907853269984665640564039457.584007913129639935"),
])
def test_format_units(amount, decimals, expected):
    assert format_units(amount, decimals) == expected


def test_checksum():
    assert checksum(" 0x7a250d5630b4cf539739df2c5dacb4c659f2488d ") == "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D"
    for bad in ("0x123", "hello", "", None):
        with pytest.raises(InvalidArgument):
            checksum(bad)


def test_zero_address():
    assert is_zero_address("0x0000000000000000000000000000000000000000")
    assert is_zero_address(None)
    assert not is_zero_address(OWNER)


def test_pending_timeout_becomes_remote_failure():
    def wait_for_transaction_receipt(tx_hash, timeout):
        raise TimeExhausted("too slow")

    w3 = SimpleNamespace(eth=SimpleNamespace(wait_for_transaction_receipt=wait_for_transaction_receipt))
    with pytest.raises(RemoteCallFailure, match="No receipt"):
        PendingTx(w3, b"\x01" * 32, timeout=1).wait()


class _FakeEth:
    def __init__(self):
        self.raw = []
        self.chain_id = 11155111
        self.gas_price = 7
        self.account = SimpleNamespace(from_key=lambda key: _FakeAccount())

    def get_transaction_count(self, address, block):
        assert block == "pending"
        return 9

    def get_balance(self, address):
        return 5

    def estimate_gas(self, tx):
        return 21000

    def send_raw_transaction(self, raw):
        self.raw.append(raw)
        return b"\x0f" * 32


class _FakeAccount:
    address = OWNER

    def __init__(self):
        self.signed = []

    def sign_transaction(self, tx):
        self.signed.append(tx)
        return SimpleNamespace(raw_transaction=b"signed")


class _FakeFn:
    def __init__(self):
        self.built = None

    def estimate_gas(self, params):
        return 100_000

    def build_transaction(self, params):
        self.built = dict(params)
        return self.built


def _wallet():
    return Wallet(SimpleNamespace(eth=_FakeEth()), "0x" + "12" * 32)


def test_transact_pads_the_gas_estimate():
    wallet = _wallet()
    fn = _FakeFn()

    pending = wallet.transact(fn, value=3)

    assert fn.built == {"from": OWNER, "value": 3, "nonce": 9, "chainId": 11155111, "gas": 120_000}
    assert wallet.w3.eth.raw == [b"signed"]
    assert pending.tx_hash == b"\x0f" * 32


def test_transact_with_fixed_gas():
    fn = _FakeFn()
    _wallet().transact(fn, gas=200_000)
    assert fn.built["gas"] == 200_000


def test_send_eth():
    wallet = _wallet()
    wallet.send_eth(OTHER, 10)
    tx = wallet.account.signed[0]
    assert tx["to"] == OTHER
    assert tx["gas"] == 21000
    assert tx["gasPrice"] == 7
    assert tx["value"] == 10


def test_read_only_wallet_has_no_address():
    wallet = Wallet(SimpleNamespace(eth=_FakeEth()), None, 1)
    with pytest.raises(ConfigError):
        wallet.address
    assert wallet.balance(OTHER) == 5
