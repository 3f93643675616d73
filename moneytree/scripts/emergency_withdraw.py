"""Pull every wei of ETH out of the token contract to the owner."""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..session import Session, open_session


def run(console: Console, session: Session):
    token = session.token(console.ask_address("Enter the deployed Token contract address: ", "token contract address"))
    console.say(f"Attempting to withdraw ETH from the contract on the {session.settings.network} network")
    console.kv("ETH held by contract", f"{format_units(token.eth_balance())} ETH")

    if not console.confirm(
        "You are about to withdraw all ETH from the contract to the owner's address. Proceed?"
    ):
        console.warn("ETH withdrawal aborted.")
        return None

    console.say("Withdrawing ETH...")
    confirmation = session.submit_once("emergencyWithdrawETH", token.emergency_withdraw_eth)
    console.success("ETH withdrawal successful!")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Emergency Withdraw ETH")


if __name__ == "__main__":
    sys.exit(main())
