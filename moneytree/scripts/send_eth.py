"""Send plain ETH, typically to fund the token contract."""

import sys

from ..chain import format_units
from ..console import Console, run_script
from ..errors import InsufficientBalance
from ..session import Session, open_session


def run(console: Console, session: Session):
    recipient = console.ask_address("Enter the recipient address (e.g. the token contract): ", "recipient address")
    amount = console.ask_amount("Enter the amount of ETH you want to send: ", 18, "ETH amount")
    wallet = session.wallet
    if wallet.balance() < amount:
        raise InsufficientBalance("Insufficient ETH balance.")

    console.say(f"You are about to send {format_units(amount)} ETH to {recipient}")
    if not console.confirm("Do you want to proceed with the transaction?"):
        console.warn("Transaction cancelled.")
        return None

    confirmation = session.submit_once("ETH transfer", lambda: wallet.send_eth(recipient, amount))
    console.success(f"Transaction successful! Hash: {confirmation.tx_hex}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return confirmation


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Send ETH")


if __name__ == "__main__":
    sys.exit(main())
