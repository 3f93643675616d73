"""web3 connection, signing wallet and unit helpers."""

import logging
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional

from web3 import Web3
from web3.exceptions import TimeExhausted

from .config import Settings
from .errors import ConfigError, InvalidArgument, RemoteCallFailure

log = logging.getLogger("moneytree")

GAS_BUFFER = Decimal("1.2")
RECEIPT_TIMEOUT = 300
ZERO_ADDRESS = "0x" + "0" * 40
PRECISION = 200  # enough for uint256 amounts at 18 decimals


# --------------------------------------------------------------------------- #
#                                  units                                      #
# --------------------------------------------------------------------------- #
def parse_units(text, decimals: int = 18) -> int:
    """Convert a human amount such as ``"1.5"`` to base units.

    The amount must be positive and carry no more fractional digits than the
    token has decimals.
    """
    raw = str(text).strip()
    with localcontext() as ctx:
        ctx.prec = PRECISION
        try:
            value = Decimal(raw)
        except (InvalidOperation, ValueError):
            raise InvalidArgument(f"'{raw}' is not a number") from None
        if not value.is_finite() or value <= 0:
            raise InvalidArgument(f"amount must be greater than 0, got '{raw}'")
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise InvalidArgument(f"'{raw}' has more than {decimals} decimal places")
    return int(scaled)


def format_units(amount: int, decimals: int = 18) -> str:
    """Base units back to a fixed-point string, trailing zeros trimmed."""
    with localcontext() as ctx:
        ctx.prec = PRECISION
        text = format(Decimal(int(amount)).scaleb(-decimals), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def checksum(address) -> str:
    if not isinstance(address, str) or not Web3.is_address(address.strip()):
        raise InvalidArgument(f"Invalid address: {address!r}")
    return Web3.to_checksum_address(address.strip())


def is_zero_address(address) -> bool:
    return not address or str(address).lower() == ZERO_ADDRESS


# --------------------------------------------------------------------------- #
#                               transactions                                  #
# --------------------------------------------------------------------------- #
class PendingTx:
    """A submitted transaction whose receipt has not been fetched yet."""

    def __init__(self, w3: Web3, tx_hash, timeout: int = RECEIPT_TIMEOUT):
        self.w3 = w3
        self.tx_hash = tx_hash
        self.timeout = timeout

    @property
    def tx_hex(self) -> str:
        return Web3.to_hex(self.tx_hash)

    def wait(self):
        try:
            return self.w3.eth.wait_for_transaction_receipt(self.tx_hash, timeout=self.timeout)
        except TimeExhausted as e:
            raise RemoteCallFailure(f"No receipt for {self.tx_hex} after {self.timeout}s") from e


def connect(settings: Settings) -> Web3:
    provider = Web3.HTTPProvider(settings.rpc_url, request_kwargs={"timeout": 60})
    w3 = Web3(provider)
    if not w3.is_connected():
        raise ConfigError(f"Unable to connect to the {settings.network} RPC endpoint")
    log.info(f"Connected to {settings.network} (block {w3.eth.block_number})")
    return w3


class Wallet:
    """Signing client: a web3 connection plus the operator's account."""

    def __init__(self, w3: Web3, private_key: Optional[str], chain_id: Optional[int] = None):
        self.w3 = w3
        self.account = w3.eth.account.from_key(private_key) if private_key else None
        self.chain_id = chain_id or w3.eth.chain_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "Wallet":
        return cls(connect(settings), settings.private_key or None, settings.chain_id)

    @property
    def address(self) -> str:
        if self.account is None:
            raise ConfigError("This operation needs PRIVATE_KEY to be set.")
        return self.account.address

    def balance(self, address: Optional[str] = None) -> int:
        return self.w3.eth.get_balance(address or self.address)

    def contract(self, address: str, abi):
        return self.w3.eth.contract(address=checksum(address), abi=abi)

    def _base_params(self, value: int) -> dict:
        return {
            "from": self.address,
            "value": value,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "chainId": self.chain_id,
        }

    def estimate(self, fn, value: int = 0) -> int:
        return fn.estimate_gas({"from": self.address, "value": value})

    def transact(self, fn, value: int = 0, gas: Optional[int] = None) -> PendingTx:
        """Sign and send a contract call (or constructor) and return its handle."""
        params = self._base_params(value)
        if gas is None:
            gas = int(Decimal(self.estimate(fn, value)) * GAS_BUFFER)
        params["gas"] = gas
        tx = fn.build_transaction(params)
        return self._send(tx)

    def send_eth(self, to: str, value: int) -> PendingTx:
        tx = self._base_params(value)
        tx["to"] = checksum(to)
        tx["gas"] = self.w3.eth.estimate_gas({"from": self.address, "to": tx["to"], "value": value})
        tx["gasPrice"] = self.w3.eth.gas_price
        return self._send(tx)

    def _send(self, tx: dict) -> PendingTx:
        signed = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        return PendingTx(self.w3, tx_hash)

    # deployment
    def constructor(self, abi, bytecode, *args):
        return self.w3.eth.contract(abi=abi, bytecode=bytecode).constructor(*args)

    def deploy(self, abi, bytecode, *args) -> PendingTx:
        return self.transact(self.constructor(abi, bytecode, *args))
