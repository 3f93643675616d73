"""Renounce ownership of the token. Irreversible, so it asks twice."""

import sys

from ..console import Console, run_script
from ..session import Session, open_session


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)

    current_owner = token.owner()
    console.kv("Current owner is", current_owner)
    if session.wallet.address.lower() != current_owner.lower():
        console.warn(
            f"You are not the owner of this contract. Only the owner ({current_owner}) can renounce ownership."
        )
        return False

    answer = console.ask("You are the owner. Do you want to renounce ownership? (yes/no): ")
    if answer == "":
        console.say("Ownership remains unchanged.")
        return False
    if answer.lower() != "yes" or not console.confirm(
        "Are you sure you want to renounce ownership? This action cannot be reversed!"
    ):
        console.warn("Ownership renouncement canceled.")
        return False

    console.say("Renouncing ownership...")
    session.submit_once("renounceOwnership", token.renounce_ownership)
    console.success("Ownership has been renounced.")
    console.kv("New owner is", token.owner())
    return True


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Manage Ownership")


if __name__ == "__main__":
    sys.exit(main())
