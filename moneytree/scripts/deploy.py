"""Deploy MoneytreeToken (or another compiled contract) from its Hardhat artifact."""

import sys

from ..abi import load_artifact
from ..chain import format_units, parse_units
from ..console import Console, run_script
from ..errors import InsufficientBalance, RemoteCallFailure
from ..session import Session, open_session

DEFAULT_SUPPLY = "1000000"
SUPPLY_DECIMALS = 18


def run(console: Console, session: Session):
    name = console.ask_contract_name()
    supply_text = console.ask(
        f"Enter the initial supply (or press Enter for default '{DEFAULT_SUPPLY}'): ",
        default=DEFAULT_SUPPLY,
    )
    supply = parse_units(supply_text, SUPPLY_DECIMALS)
    artifact = load_artifact(name, session.settings.artifacts_dir)

    wallet = session.wallet
    balance = wallet.balance()
    console.kv("Deployer", wallet.address)
    console.kv("Balance", f"{format_units(balance)} ETH")

    constructor = wallet.constructor(artifact["abi"], artifact["bytecode"], supply)
    fee = wallet.estimate(constructor) * wallet.w3.eth.gas_price
    console.kv("Estimated gas fee", f"{format_units(fee)} ETH")
    if balance < fee:
        raise InsufficientBalance(
            f"Insufficient funds: you have {format_units(balance)} ETH but need "
            f"approximately {format_units(fee)} ETH."
        )

    if not console.confirm(f"Do you want to proceed with the deployment to {session.settings.network}?"):
        console.warn("Deployment canceled.")
        return

    confirmation = session.submit_once(
        f"Deploy {name}", lambda: wallet.deploy(artifact["abi"], artifact["bytecode"], supply)
    )
    address = confirmation.receipt["contractAddress"]
    if not address:
        raise RemoteCallFailure("Deployment receipt has no contract address", confirmation.receipt)
    console.success(f"{name} token deployed to: {address}")
    console.kv("Tx", session.settings.tx_url(confirmation.tx_hex))
    return address


def main() -> int:
    return run_script(lambda console: run(console, open_session(console)), "Deploy MoneytreeToken")


if __name__ == "__main__":
    sys.exit(main())
