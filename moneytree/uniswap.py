"""Uniswap V2 router, factory and pair access for a token/WETH market."""

import time
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import List, Optional

from .abi import FACTORY_V2_ABI, PAIR_V2_ABI, ROUTER_V2_ABI
from .chain import PRECISION, PendingTx, Wallet, checksum, is_zero_address
from .errors import RemoteCallFailure

DEADLINE_SECONDS = 60 * 10
BUY_GAS_LIMIT = 1_500_000
SELL_GAS_LIMIT = 200_000


def deadline(seconds: int = DEADLINE_SECONDS, now=None) -> int:
    return int(now if now is not None else time.time()) + seconds


@dataclass(frozen=True)
class PairReserves:
    pair: str
    token_reserve: int
    weth_reserve: int
    total_supply: Optional[int] = None

    @property
    def has_liquidity(self) -> bool:
        return self.token_reserve > 0 and self.weth_reserve > 0

    def price_in_weth(self, token_decimals: int, weth_decimals: int = 18) -> Optional[Decimal]:
        """WETH per whole token, or None when either side is empty."""
        if not self.has_liquidity:
            return None
        with localcontext() as ctx:
            ctx.prec = PRECISION
            weth = Decimal(self.weth_reserve).scaleb(-weth_decimals)
            token = Decimal(self.token_reserve).scaleb(-token_decimals)
            return weth / token

    def share_of(self, liquidity: int):
        """Token and WETH amounts ``liquidity`` LP units redeem for, pro rata."""
        if not self.total_supply:
            return 0, 0
        return (
            liquidity * self.token_reserve // self.total_supply,
            liquidity * self.weth_reserve // self.total_supply,
        )


class UniswapV2:
    def __init__(self, wallet: Wallet, router: str, factory: str, weth: Optional[str] = None):
        self.wallet = wallet
        self.router_address = checksum(router)
        self.router = wallet.contract(self.router_address, ROUTER_V2_ABI)
        self.factory = wallet.contract(factory, FACTORY_V2_ABI)
        self._weth = checksum(weth) if weth else None

    @property
    def weth(self) -> str:
        if self._weth is None:
            self._weth = self.router.functions.WETH().call()
        return self._weth

    # ------------------------------ reads -------------------------------- #
    def get_pair(self, token: str) -> Optional[str]:
        pair = self.factory.functions.getPair(checksum(token), self.weth).call()
        return None if is_zero_address(pair) else pair

    def pair_contract(self, pair: str):
        return self.wallet.contract(pair, PAIR_V2_ABI)

    def pair_reserves(self, token: str) -> Optional[PairReserves]:
        pair_address = self.get_pair(token)
        if pair_address is None:
            return None
        pair = self.pair_contract(pair_address)
        token0 = pair.functions.token0().call()
        token1 = pair.functions.token1().call()
        reserve0, reserve1, _ = pair.functions.getReserves().call()
        total_supply = pair.functions.totalSupply().call()
        if token0.lower() == token.lower():
            return PairReserves(pair_address, reserve0, reserve1, total_supply)
        if token1.lower() == token.lower():
            return PairReserves(pair_address, reserve1, reserve0, total_supply)
        raise RemoteCallFailure("Token not found in the pair.")

    def amounts_out(self, amount_in: int, path: List[str]) -> List[int]:
        return self.router.functions.getAmountsOut(amount_in, path).call()

    def quote_out(self, amount_in: int, path: List[str]) -> int:
        try:
            return self.amounts_out(amount_in, path)[-1]
        except Exception as e:
            raise RemoteCallFailure(
                "Failed to fetch the output amount from Uniswap. The token might not have "
                "enough liquidity, or might not be listed on Uniswap."
            ) from e

    # ------------------------------ writes ------------------------------- #
    def add_liquidity_eth(self, token, amount_token, amount_token_min, amount_eth, amount_eth_min,
                          to=None, expires=None) -> PendingTx:
        fn = self.router.functions.addLiquidityETH(
            checksum(token), amount_token, amount_token_min, amount_eth_min,
            to or self.wallet.address, expires or deadline(),
        )
        return self.wallet.transact(fn, value=amount_eth)

    def remove_liquidity_eth(self, token, liquidity, amount_token_min, amount_eth_min,
                             to=None, expires=None) -> PendingTx:
        fn = self.router.functions.removeLiquidityETH(
            checksum(token), liquidity, amount_token_min, amount_eth_min,
            to or self.wallet.address, expires or deadline(),
        )
        return self.wallet.transact(fn)

    def swap_exact_eth_for_tokens(self, token, amount_eth, amount_out_min, to=None,
                                  gas=BUY_GAS_LIMIT) -> PendingTx:
        fn = self.router.functions.swapExactETHForTokens(
            amount_out_min, [self.weth, checksum(token)], to or self.wallet.address, deadline(),
        )
        return self.wallet.transact(fn, value=amount_eth, gas=gas)

    def swap_exact_tokens_for_eth(self, token, amount_in, amount_out_min, to=None,
                                  gas=SELL_GAS_LIMIT) -> PendingTx:
        fn = self.router.functions.swapExactTokensForETH(
            amount_in, amount_out_min, [checksum(token), self.weth], to or self.wallet.address, deadline(),
        )
        return self.wallet.transact(fn, gas=gas)

    def swap_exact_tokens_for_eth_supporting_fee(self, token, amount_in, amount_out_min, to=None,
                                                 gas=SELL_GAS_LIMIT) -> PendingTx:
        fn = self.router.functions.swapExactTokensForETHSupportingFeeOnTransferTokens(
            amount_in, amount_out_min, [checksum(token), self.weth], to or self.wallet.address, deadline(),
        )
        return self.wallet.transact(fn, gas=gas)
