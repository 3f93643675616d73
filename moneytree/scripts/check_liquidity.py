"""Show the token/WETH Uniswap V2 pair, its reserves and the implied price."""

import sys
from typing import Optional

from ..chain import format_units
from ..console import Console, run_script
from ..session import Session, open_session
from ..token import MoneytreeToken
from ..uniswap import PairReserves


def show_liquidity(console: Console, session: Session, token: MoneytreeToken) -> Optional[PairReserves]:
    console.say(f"Checking liquidity on the {session.settings.network} network")
    reserves = session.dex().pair_reserves(token.address)
    if reserves is None:
        console.warn("No pair found for this token and WETH on Uniswap. Liquidity may not have been added yet.")
        return None

    decimals = token.decimals()
    console.kv("Uniswap Pair Address", reserves.pair)
    console.kv("Token Reserve", format_units(reserves.token_reserve, decimals))
    console.kv("WETH Reserve", format_units(reserves.weth_reserve))
    if reserves.has_liquidity:
        console.success("Liquidity present in the pool!")
        console.kv("Token Price in WETH", f"{reserves.price_in_weth(decimals):.18f}".rstrip("0").rstrip("."))
    else:
        console.warn("No liquidity found in the pool.")
    return reserves


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    return show_liquidity(console, session, token)


def main() -> int:
    return run_script(
        lambda console: run(console, open_session(console, require_key=False)),
        "Check Liquidity",
    )


if __name__ == "__main__":
    sys.exit(main())
