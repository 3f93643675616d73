import logging

from .abi import MONEYTREE_TOKEN_ABI
from .chain import PendingTx, Wallet, checksum
from .errors import InvalidArgument
from .submitter import confirm

log = logging.getLogger("moneytree")

MAX_TAX_RATE_BPS = 2000


def validate_tax_rate(value) -> int:
    """Parse a tax rate in basis points; the contract accepts 0-2000."""
    text = str(value).strip()
    try:
        rate = int(text)
    except ValueError:
        raise InvalidArgument(
            f"Invalid tax rate '{text}'. It must be a whole number of basis points."
        ) from None
    if not 0 <= rate <= MAX_TAX_RATE_BPS:
        raise InvalidArgument(
            f"Invalid tax rate. It must be a number between 0 and {MAX_TAX_RATE_BPS} (basis points)."
        )
    return rate


class MoneytreeToken:
    """The deployed token, reached only through its ABI."""

    def __init__(self, wallet: Wallet, address: str, abi=None):
        self.wallet = wallet
        self.address = checksum(address)
        self.contract = wallet.contract(self.address, abi or MONEYTREE_TOKEN_ABI)
        self._decimals = None

    # reads
    def decimals(self) -> int:
        if self._decimals is None:
            self._decimals = self.contract.functions.decimals().call()
        return self._decimals

    def balance_of(self, owner: str) -> int:
        return self.contract.functions.balanceOf(owner).call()

    def allowance(self, owner: str, spender: str) -> int:
        return self.contract.functions.allowance(owner, spender).call()

    def owner(self) -> str:
        return self.contract.functions.owner().call()

    def tax_rate(self) -> int:
        return self.contract.functions.taxRate().call()

    def tax_collector(self) -> str:
        return self.contract.functions.taxCollector().call()

    def tokens_for_tax(self) -> int:
        return self.contract.functions.tokensForTax().call()

    def swap_enabled(self) -> bool:
        return self.contract.functions.swapEnabled().call()

    def eth_balance(self) -> int:
        return self.wallet.balance(self.address)

    # writes
    def approve(self, spender: str, amount: int) -> PendingTx:
        return self.wallet.transact(self.contract.functions.approve(spender, amount))

    def ensure_allowance(self, spender: str, amount: int) -> bool:
        """Approve exactly ``amount`` for ``spender`` if the allowance is short.

        Returns True when an approval was sent and confirmed.
        """
        current = self.allowance(self.wallet.address, spender)
        if current >= amount:
            log.info("Sufficient allowance detected.")
            return False
        log.info(f"Insufficient allowance ({current} < {amount}). Approving {spender}...")
        pending = self.approve(spender, amount)
        log.info(f"Approval transaction sent → {pending.tx_hex}")
        confirm(pending)
        log.info("Approval successful.")
        return True

    def renounce_ownership(self) -> PendingTx:
        return self.wallet.transact(self.contract.functions.renounceOwnership())

    def set_tax_rate(self, rate_bps: int) -> PendingTx:
        return self.wallet.transact(self.contract.functions.setTaxRate(validate_tax_rate(rate_bps)))

    def set_tax_collector(self, collector: str) -> PendingTx:
        return self.wallet.transact(self.contract.functions.setTaxCollector(checksum(collector)))

    def set_tax_exemption(self, account: str, exempt: bool) -> PendingTx:
        return self.wallet.transact(self.contract.functions.setTaxExemption(checksum(account), exempt))

    def set_swap_enabled(self, enabled: bool) -> PendingTx:
        return self.wallet.transact(self.contract.functions.setSwapEnabled(enabled))

    def emergency_withdraw_eth(self) -> PendingTx:
        return self.wallet.transact(self.contract.functions.emergencyWithdrawETH())
