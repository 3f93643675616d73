"""Toggle the token's ``swapEnabled`` flag."""

import sys

from ..console import Console, run_script
from ..session import Session, open_session


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)

    current = token.swap_enabled()
    console.kv("Current swap enabled status", current)
    answer = console.ask(
        f"Do you want to enable swaps? (Current: {current}) (yes/no or press Enter to keep it unchanged): "
    ).lower()
    if answer == "":
        console.say("Swap enabled status remains unchanged.")
        return None
    if answer not in ("yes", "no"):
        console.warn("Invalid input. Swap enabled status remains unchanged.")
        return None

    enable = answer == "yes"
    if not console.confirm(f"You are about to {'enable' if enable else 'disable'} swaps. Proceed?"):
        console.warn("Swap enabled status change aborted.")
        return None

    session.submit_once("setSwapEnabled", lambda: token.set_swap_enabled(enable))
    console.success(f"Swaps are now {'enabled' if enable else 'disabled'}")
    return enable


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Enable Swap")


if __name__ == "__main__":
    sys.exit(main())
