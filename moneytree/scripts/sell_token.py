"""Sell tokens for ETH.

``swapExactTokensForETH`` is tried first; when it fails the fee-on-transfer
variant is tried in the same round. Rounds repeat under the swap retry
policy (``MONEYTREE_SWAP_MAX_ATTEMPTS``, ``MONEYTREE_SWAP_RETRY_DELAY``).
"""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..errors import InsufficientBalance
from ..session import Session, open_session
from ..slippage import bps_to_percent, min_acceptable_bps, tolerance_to_bps
from ..submitter import try_in_order

DEFAULT_TOLERANCE = "50"


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the Token contract address you want to sell: ", "token contract address"))
    decimals = token.decimals()
    amount_in = console.ask_amount("Enter the amount of tokens you want to sell: ", decimals, "token amount")
    tolerance_bps = tolerance_to_bps(console.ask(
        f"Enter the slippage tolerance percentage (press Enter for {DEFAULT_TOLERANCE}): ",
        default=DEFAULT_TOLERANCE,
    ))

    wallet = session.wallet
    if token.balance_of(wallet.address) < amount_in:
        raise InsufficientBalance("Insufficient token balance.")

    dex = session.dex()
    expected = dex.quote_out(amount_in, [token.address, dex.weth])
    amount_out_min = min_acceptable_bps(expected, tolerance_bps)
    console.kv("Expected ETH", f"{format_units(expected)} (before slippage)")
    console.kv("Slippage Tolerance", f"{bps_to_percent(tolerance_bps)}%")

    if not console.confirm(
        f"Do you want to proceed with the transaction to sell {format_units(amount_in, decimals)} "
        f"tokens for at least {format_units(amount_out_min)} ETH?"
    ):
        console.warn("Transaction cancelled.")
        return None

    swap = try_in_order(
        [
            lambda: dex.swap_exact_tokens_for_eth(token.address, amount_in, amount_out_min),
            lambda: dex.swap_exact_tokens_for_eth_supporting_fee(token.address, amount_in, amount_out_min),
        ],
        labels=["swapExactTokensForETH", "swapExactTokensForETHSupportingFeeOnTransferTokens"],
    )

    def sell_round():
        token.ensure_allowance(dex.router_address, amount_in)
        return swap()

    confirmation = session.swap_submitter("Sell").submit(sell_round)
    console.success(f"Transaction successful! Hash: {confirmation.tx_hex}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Sell Token")


if __name__ == "__main__":
    sys.exit(main())
