"""Interactive prompts and coloured console output.

Everything that talks to the operator lives here so the rest of the package
only ever sees validated values.
"""

import logging
import sys
import traceback
from typing import Callable, Optional

from colorama import Fore, Style, init

from .chain import checksum, parse_units
from .config import resolve_network
from .errors import InvalidArgument, MoneytreeError
from .log import setup_logging
from .slippage import tolerance_to_bps

init(autoreset=True)

log = logging.getLogger("moneytree")

DEFAULT_CONTRACT_NAME = "MoneytreeToken"


class Console:
    def __init__(self, input_fn: Callable[[str], str] = input, out=None):
        self._input = input_fn
        self._out = out

    # ------------------------------ output ------------------------------- #
    def say(self, message, indent=0, color=Fore.WHITE):
        print(f"{'  ' * indent}{color}{message}{Style.RESET_ALL}", file=self._out or sys.stdout)

    def banner(self, title):
        self.say("=" * 50, color=Style.BRIGHT + Fore.MAGENTA)
        self.say(f"  {title}", color=Fore.CYAN)
        self.say("=" * 50, color=Style.BRIGHT + Fore.MAGENTA)

    def kv(self, key, value, indent=1):
        self.say(f"{key:<22}: {value}", indent=indent, color=Fore.CYAN)

    def success(self, message, indent=0):
        self.say(message, indent=indent, color=Fore.GREEN)

    def warn(self, message, indent=0):
        self.say(message, indent=indent, color=Fore.YELLOW)

    # ------------------------------ input -------------------------------- #
    def ask(self, question: str, default: Optional[str] = None) -> str:
        answer = self._input(f"{Style.BRIGHT}{Fore.CYAN}{question}{Style.RESET_ALL}").strip()
        if not answer and default is not None:
            return default
        return answer

    def confirm(self, question: str) -> bool:
        """Only a literal ``yes`` (any case) counts as consent."""
        return self.ask(f"{question} (yes/no): ").lower() == "yes"

    def ask_network(self) -> str:
        return resolve_network(self.ask("Choose the network (mainnet or sepolia): "))

    def ask_contract_name(self) -> str:
        return self.ask(
            f"Enter the contract (factory) name (or press Enter for default '{DEFAULT_CONTRACT_NAME}'): ",
            default=DEFAULT_CONTRACT_NAME,
        )

    def ask_address(self, question: str, what: str = "address") -> str:
        answer = self.ask(question)
        try:
            return checksum(answer)
        except InvalidArgument:
            raise InvalidArgument(f"Invalid {what}.") from None

    def ask_amount(self, question: str, decimals: int = 18, what: str = "amount") -> int:
        answer = self.ask(question)
        try:
            return parse_units(answer, decimals)
        except InvalidArgument as e:
            raise InvalidArgument(f"Invalid {what}: {e}") from None

    def ask_tolerance(self, question: str = "Enter the slippage tolerance percentage (e.g., 1 for 1%): ") -> int:
        return tolerance_to_bps(self.ask(question))


def run_script(body: Callable[[Console], None], title: str, console: Optional[Console] = None) -> int:
    """Run a script body and turn its outcome into a process exit code."""
    setup_logging()
    console = console or Console()
    console.banner(title)
    try:
        body(console)
    except KeyboardInterrupt:
        console.warn("\nOperation cancelled by user")
        return 130
    except MoneytreeError as e:
        log.error(f"{title} failed: {e}")
        return 1
    except Exception as e:
        log.error(f"{title} failed with an unexpected error: {e}")
        traceback.print_exc()
        return 1
    return 0
