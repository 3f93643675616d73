"""Inspect the pool, then optionally add liquidity to it."""

import sys

from ..console import Console, run_script
from ..session import Session, open_session
from .add_liquidity import add_liquidity
from .check_liquidity import show_liquidity


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    show_liquidity(console, session, token)
    if not console.confirm("Do you want to add liquidity?"):
        console.warn("Liquidity addition canceled.")
        return None
    console.say(f"\nStarting the process of adding liquidity on the {session.settings.network} network:\n")
    return add_liquidity(console, session, token, ask_confirmation=False)


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Manage Liquidity")


if __name__ == "__main__":
    sys.exit(main())
