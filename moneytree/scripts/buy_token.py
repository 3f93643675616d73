"""Buy tokens with ETH through ``swapExactETHForTokens``."""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..errors import InsufficientBalance
from ..session import Session, open_session
from ..slippage import bps_to_percent, min_acceptable_bps, tolerance_to_bps

DEFAULT_TOLERANCE = "1"


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the Token contract address you want to buy: ", "token contract address"))
    amount_eth = console.ask_amount("Enter the amount of ETH you want to spend: ", 18, "ETH amount")
    tolerance_bps = tolerance_to_bps(console.ask(
        f"Enter the slippage tolerance percentage (press Enter for {DEFAULT_TOLERANCE}): ",
        default=DEFAULT_TOLERANCE,
    ))
    wallet = session.wallet
    if wallet.balance() < amount_eth:
        raise InsufficientBalance("Insufficient ETH balance.")

    dex = session.dex()
    decimals = token.decimals()
    expected = dex.quote_out(amount_eth, [dex.weth, token.address])
    amount_out_min = min_acceptable_bps(expected, tolerance_bps)
    console.kv("Expected tokens", f"{format_units(expected, decimals)} (before slippage)")
    console.kv("Slippage Tolerance", f"{bps_to_percent(tolerance_bps)}%")

    if not console.confirm(
        f"Do you want to proceed with the transaction to buy at least "
        f"{format_units(amount_out_min, decimals)} tokens for {format_units(amount_eth)} ETH?"
    ):
        console.warn("Transaction cancelled.")
        return None

    confirmation = session.swap_submitter("swapExactETHForTokens").submit(
        lambda: dex.swap_exact_eth_for_tokens(token.address, amount_eth, amount_out_min)
    )
    console.success(f"Transaction successful! Hash: {confirmation.tx_hex}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Buy Token")


if __name__ == "__main__":
    sys.exit(main())
