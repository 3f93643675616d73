"""Print the current owner of the token."""

import sys

from ..console import Console, run_script
from ..session import Session, open_session


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)
    owner = token.owner()
    console.kv("Current owner is", owner)
    return owner


def main() -> int:
    return run_script(
        lambda console: run(console, open_session(console, require_key=False)),
        "Check Ownership",
    )


if __name__ == "__main__":
    sys.exit(main())
