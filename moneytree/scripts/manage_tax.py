"""Change the tax rate and/or the tax collector, one confirmed step at a time."""

import sys

from ..chain import checksum
from ..console import Console, run_script
from ..errors import InvalidArgument
from ..session import Session, open_session
from ..slippage import bps_to_percent
from ..token import MoneytreeToken, validate_tax_rate


def update_tax_rate(console: Console, session: Session, token: MoneytreeToken):
    answer = console.ask(
        "Enter the new tax rate (basis points, e.g., 100 for 1%) or press Enter to keep it unchanged: "
    )
    if not answer:
        console.say("Tax rate remains unchanged.")
        return None
    rate = validate_tax_rate(answer)
    if not console.confirm(f"You are about to change the tax rate to {bps_to_percent(rate)}%. Proceed?"):
        console.warn("Tax rate change aborted.")
        return None
    session.submit_once("setTaxRate", lambda: token.set_tax_rate(rate))
    console.success(f"Tax rate changed to: {bps_to_percent(rate)} %")
    return rate


def update_tax_collector(console: Console, session: Session, token: MoneytreeToken):
    answer = console.ask("Enter the new tax collector address or press Enter to keep it unchanged: ")
    if not answer:
        console.say("Tax collector remains unchanged.")
        return None
    try:
        collector = checksum(answer)
    except InvalidArgument:
        raise InvalidArgument("Invalid tax collector address.") from None
    if not console.confirm(f"You are about to change the tax collector to {collector}. Proceed?"):
        console.warn("Tax collector change aborted.")
        return None
    session.submit_once("setTaxCollector", lambda: token.set_tax_collector(collector))
    console.success(f"Tax collector changed to: {collector}")
    return collector


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    token = session.token(console.ask_address("Enter the deployed contract address: ", "contract address"), name)

    console.say("\n--- Current Contract Settings ---")
    console.kv("Tax rate", f"{bps_to_percent(token.tax_rate())} %")
    console.kv("Tax collector", token.tax_collector())
    console.say("---------------------------------\n")

    rate = update_tax_rate(console, session, token)
    console.say("---------------------------------\n")
    collector = update_tax_collector(console, session, token)
    console.say("\n--- Update Complete ---")
    return rate, collector


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Manage Tax")


if __name__ == "__main__":
    sys.exit(main())
