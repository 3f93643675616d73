"""Add an address to, or remove it from, the tax-exempt list."""

import sys

from ..console import Console, run_script
from ..errors import InvalidArgument
from ..session import Session, open_session

ACTIONS = ("add", "remove")


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)

    action = console.ask(
        "Would you like to 'add' or 'remove' an address from the tax-exempt list? (add/remove): "
    ).lower()
    if action not in ACTIONS:
        raise InvalidArgument("Invalid action. Please choose 'add' or 'remove'.")
    account = console.ask_address("Enter the address to update in the tax-exempt list: ")

    adding = action == "add"
    if not console.confirm(
        f"You are about to {action} {account} {'to' if adding else 'from'} the tax-exempt list. Proceed?"
    ):
        console.warn(f"{'Adding' if adding else 'Removing'} address aborted.")
        return None

    session.submit_once("setTaxExemption", lambda: token.set_tax_exemption(account, adding))
    console.success(f"{account} was successfully {'added to' if adding else 'removed from'} the tax-exempt list.")
    console.say("\n--- Update Complete ---")
    return account, adding


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Manage Tax Exemptions")


if __name__ == "__main__":
    sys.exit(main())
