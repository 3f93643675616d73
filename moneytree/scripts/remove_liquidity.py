"""Burn LP tokens for the token/WETH pair via ``removeLiquidityETH``."""

import sys

from ..abi import PAIR_V2_ABI
from ..chain import format_units, parse_units
from ..console import Console, run_script
from ..errors import InsufficientBalance, MoneytreeError
from ..session import Session, open_session
from ..slippage import bps_to_percent, min_acceptable_bps
from ..token import MoneytreeToken

LP_DECIMALS = 18


def ask_liquidity(console: Console, lp_balance: int) -> int:
    answer = console.ask("Enter the amount of LP tokens to remove (or 'all'): ").lower()
    if answer == "all":
        return lp_balance
    return parse_units(answer, LP_DECIMALS)


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    dex = session.dex()
    wallet = session.wallet

    reserves = dex.pair_reserves(token.address)
    if reserves is None:
        raise MoneytreeError("No token/WETH pair exists. Add liquidity first.")
    lp = MoneytreeToken(wallet, reserves.pair, abi=PAIR_V2_ABI)
    lp_balance = lp.balance_of(wallet.address)
    console.kv("Pair (LP token)", reserves.pair)
    console.kv("LP balance", format_units(lp_balance, LP_DECIMALS))
    if lp_balance == 0:
        raise InsufficientBalance("You have zero LP tokens.")

    liquidity = ask_liquidity(console, lp_balance)
    if liquidity > lp_balance:
        raise InsufficientBalance(
            f"Insufficient LP. Have {format_units(lp_balance, LP_DECIMALS)}, "
            f"need {format_units(liquidity, LP_DECIMALS)}."
        )
    tolerance_bps = console.ask_tolerance()

    decimals = token.decimals()
    expected_token, expected_eth = reserves.share_of(liquidity)
    amount_token_min = min_acceptable_bps(expected_token, tolerance_bps)
    amount_eth_min = min_acceptable_bps(expected_eth, tolerance_bps)
    console.kv("Remove", format_units(liquidity, LP_DECIMALS))
    console.kv("Expected tokens", format_units(expected_token, decimals))
    console.kv("Expected ETH", format_units(expected_eth))
    console.kv("Slippage Tolerance", f"{bps_to_percent(tolerance_bps)}%")
    console.kv("Min tokens", format_units(amount_token_min, decimals))
    console.kv("Min ETH", format_units(amount_eth_min))

    if not console.confirm("Do you want to proceed with removing liquidity?"):
        console.warn("Liquidity removal canceled.")
        return None

    def action():
        lp.ensure_allowance(dex.router_address, liquidity)
        return dex.remove_liquidity_eth(token.address, liquidity, amount_token_min, amount_eth_min)

    confirmation = session.submitter("removeLiquidityETH").submit(action)
    console.success(f"Liquidity removed successfully! Block {confirmation.block_number}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Remove Liquidity")


if __name__ == "__main__":
    sys.exit(main())
