"""Print the token's tax rate and tax collector."""

import sys

from ..console import Console, run_script
from ..session import Session, open_session
from ..slippage import bps_to_percent


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)
    rate = token.tax_rate()
    collector = token.tax_collector()
    console.kv("Current tax rate", f"{bps_to_percent(rate)} %")
    console.kv("Tax is collected by", collector)
    return rate, collector


def main() -> int:
    return run_script(
        lambda console: run(console, open_session(console, require_key=False)),
        "Check Tax",
    )


if __name__ == "__main__":
    sys.exit(main())
