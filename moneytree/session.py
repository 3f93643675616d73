"""What every script needs once the operator has picked a network."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .abi import token_abi
from .chain import Wallet
from .config import Settings, load_settings
from .submitter import Confirmation, TransactionSubmitter
from .token import MoneytreeToken
from .uniswap import UniswapV2

log = logging.getLogger("moneytree")


@dataclass
class Session:
    settings: Settings
    wallet: Wallet
    sleep: Optional[Callable[[float], None]] = field(default=None, repr=False)

    def _submitter(self, label, max_attempts, delay) -> TransactionSubmitter:
        kwargs = {"sleep": self.sleep} if self.sleep else {}
        return TransactionSubmitter(max_attempts=max_attempts, delay=delay, label=label, **kwargs)

    def submitter(self, label: str) -> TransactionSubmitter:
        """Bounded retry used for liquidity operations."""
        return self._submitter(label, self.settings.max_attempts, self.settings.retry_delay)

    def swap_submitter(self, label: str) -> TransactionSubmitter:
        """Retry policy for buys and sells; unbounded when configured with 0 attempts."""
        return self._submitter(label, self.settings.swap_max_attempts, self.settings.swap_retry_delay)

    def submit_once(self, label: str, action) -> Confirmation:
        """Owner/admin calls are sent exactly once and never retried."""
        return self._submitter(label, 1, 0).submit(action)

    def token(self, address: str, contract_name: Optional[str] = None) -> MoneytreeToken:
        """The token at ``address``, typed by the named artifact when one is given."""
        abi = token_abi(contract_name, self.settings.artifacts_dir) if contract_name else None
        return MoneytreeToken(self.wallet, address, abi=abi)

    def dex(self) -> UniswapV2:
        return UniswapV2(self.wallet, self.settings.router, self.settings.factory, self.settings.weth)


def open_session(console, require_key: bool = True) -> Session:
    network = console.ask_network()
    settings = load_settings(network, require_key=require_key)
    log.info(f"Using the {settings.network} network")
    return Session(settings, Wallet.from_settings(settings))
