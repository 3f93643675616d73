from types import SimpleNamespace

import pytest

from moneytree.config import Settings
from moneytree.console import Console

TOKEN = "0x" + "11" * 20
WETH = "0x" + "22" * 20
PAIR = "0x" + "33" * 20
ROUTER = "0x" + "44" * 20
FACTORY = "0x" + "55" * 20
OWNER = "0x" + "66" * 20
OTHER = "0x" + "77" * 20

OK_RECEIPT = {"status": 1, "blockNumber": 42}


class FakePending:
    def __init__(self, tx_hash=b"\xab" * 32, receipt=None):
        self.tx_hash = tx_hash
        self.receipt = dict(OK_RECEIPT) if receipt is None else receipt
        self.waited = 0

    @property
    def tx_hex(self):
        return "0x" + self.tx_hash.hex()

    def wait(self):
        self.waited += 1
        return self.receipt


class _Functions:
    def __init__(self, contract):
        self._contract = contract

    def __getattr__(self, name):
        contract = self._contract

        def build(*args):
            contract.calls.append((name, args))

            def call():
                value = contract.returns[name]
                if isinstance(value, Exception):
                    raise value
                if callable(value):
                    return value(*args)
                return value

            return SimpleNamespace(name=name, args=args, call=call)

        return build


class FakeContract:
    """Answers ``contract.functions.<name>(*args).call()`` from ``returns``."""

    def __init__(self, **returns):
        self.returns = returns
        self.calls = []
        self.functions = _Functions(self)


class FakeWallet:
    def __init__(self, contracts=None, address=OWNER, eth_balance=10**20):
        self.address = address
        self.contracts = {k.lower(): v for k, v in (contracts or {}).items()}
        self.eth_balance = eth_balance
        self.sent = []
        # per-call-name queue of receipts or exceptions, consumed in order
        self.outcomes = {}
        self.abis = {}

    def contract(self, address, abi):
        self.abis[address.lower()] = abi
        return self.contracts[address.lower()]

    def balance(self, address=None):
        return self.eth_balance

    def _pending(self, name):
        queue = self.outcomes.get(name)
        if queue:
            outcome = queue.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return FakePending(receipt=outcome)
        return FakePending()

    def transact(self, fn, value=0, gas=None):
        self.sent.append((fn.name, fn.args, value, gas))
        return self._pending(fn.name)

    def send_eth(self, to, value):
        self.sent.append(("transfer", (to,), value, None))
        return self._pending("transfer")


def make_settings(**overrides):
    values = dict(
        network="sepolia",
        chain_id=11155111,
        rpc_url="http://localhost:8545",
        private_key="",
        router=ROUTER,
        factory=FACTORY,
        weth=WETH,
        explorer_url="https://sepolia.etherscan.io/tx/",
        max_attempts=3,
        retry_delay=1.0,
        swap_max_attempts=3,
        swap_retry_delay=5.0,
    )
    values.update(overrides)
    return Settings(**values)


def scripted_console(*answers, out=None):
    """A Console whose prompts are answered in order from ``answers``."""
    remaining = list(answers)
    asked = []

    def answer(question):
        asked.append(question)
        if not remaining:
            raise AssertionError(f"unexpected prompt: {question}")
        return remaining.pop(0)

    console = Console(input_fn=answer, out=out)
    console.asked = asked
    console.remaining = remaining
    return console


@pytest.fixture
def sleeps():
    return []
