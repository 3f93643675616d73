"""Pair MoneytreeToken with ETH on Uniswap V2 via ``addLiquidityETH``."""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..errors import InsufficientBalance
from ..session import Session, open_session
from ..slippage import bps_to_percent, min_acceptable_bps
from ..submitter import Confirmation
from ..token import MoneytreeToken


def add_liquidity(console: Console, session: Session, token: MoneytreeToken,
                  ask_confirmation: bool = True) -> Confirmation:
    wallet = session.wallet
    dex = session.dex()
    decimals = token.decimals()

    amount_token = console.ask_amount(
        "Enter the amount of tokens you want to add as liquidity: ", decimals, "token amount")
    amount_eth = console.ask_amount(
        "Enter the amount of ETH you want to add as liquidity: ", 18, "ETH amount")
    tolerance_bps = console.ask_tolerance()

    console.say("\n--- Transaction Details ---")
    console.kv("Token Address", token.address)
    console.kv("Swap Router Address", dex.router_address)
    console.kv("Amount of Tokens", f"{format_units(amount_token, decimals)} (parsed as {amount_token})")
    console.kv("Amount of ETH", f"{format_units(amount_eth)} (parsed as {amount_eth})")
    console.kv("Slippage Tolerance", f"{bps_to_percent(tolerance_bps)}%")

    token_balance = token.balance_of(wallet.address)
    console.kv("Token Balance of signer", format_units(token_balance, decimals))
    if token_balance < amount_token:
        raise InsufficientBalance("Insufficient token balance.")
    if wallet.balance() < amount_eth:
        raise InsufficientBalance("Insufficient ETH balance.")

    amount_token_min = min_acceptable_bps(amount_token, tolerance_bps)
    amount_eth_min = min_acceptable_bps(amount_eth, tolerance_bps)
    console.kv("Min Tokens (slippage)", format_units(amount_token_min, decimals))
    console.kv("Min ETH (slippage)", format_units(amount_eth_min))

    if ask_confirmation and not console.confirm("Do you want to proceed with adding liquidity?"):
        console.warn("Liquidity addition canceled.")
        return None

    def action():
        # re-checked on every attempt: an earlier one may already have approved
        token.ensure_allowance(dex.router_address, amount_token)
        return dex.add_liquidity_eth(token.address, amount_token, amount_token_min, amount_eth, amount_eth_min)

    confirmation = session.submitter("addLiquidityETH").submit(action)
    console.success(f"Liquidity added successfully! Block {confirmation.block_number}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    console.say(f"Adding liquidity on the {session.settings.network} network")
    return add_liquidity(console, session, token)


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Add Liquidity")


if __name__ == "__main__":
    sys.exit(main())
