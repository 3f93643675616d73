"""Show the tax tokens and ETH held by the token contract itself."""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..session import Session, open_session


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    console.say(f"Checking tax tokens collected on the {session.settings.network} network")
    tokens_for_tax = token.tokens_for_tax()
    eth_balance = token.eth_balance()
    console.kv("Tax tokens collected", format_units(tokens_for_tax, token.decimals()))
    console.kv("ETH held by contract", f"{format_units(eth_balance)} ETH")
    return tokens_for_tax, eth_balance


def main() -> int:
    return run_script(
        lambda console: run(console, open_session(console, require_key=False)),
        "Check Contract Balance",
    )


if __name__ == "__main__":
    sys.exit(main())
