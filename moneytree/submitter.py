"""Transaction submission with a bounded, fixed-delay retry.

An *action* is any zero-argument callable that submits a transaction and
returns a pending handle: an object with a ``tx_hash`` attribute and a
``wait()`` method returning the receipt mapping. Actions are not idempotent;
a failed attempt may already have changed chain state.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from .errors import InvalidArgument, RemoteCallFailure, SubmissionExhausted

log = logging.getLogger("moneytree")

PENDING = "pending"
CONFIRMED = "confirmed"
FAILED = "failed"

STATUS_SUCCESS = 1


@dataclass
class TransactionAttempt:
    number: int
    outcome: str = PENDING
    error: Optional[str] = None


@dataclass(frozen=True)
class Confirmation:
    tx_hash: Any
    block_number: Optional[int]
    status: Optional[int]
    receipt: Any
    attempts: List[TransactionAttempt] = field(default_factory=list)

    @property
    def tx_hex(self) -> str:
        return _hex(self.tx_hash)


def _hex(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).hex()
        return text if text.startswith("0x") else "0x" + text
    if hasattr(value, "to_0x_hex"):
        return value.to_0x_hex()
    return str(value)


def _field(receipt, name):
    if receipt is None:
        return None
    if isinstance(receipt, dict):
        return receipt.get(name)
    try:
        return receipt[name]
    except (KeyError, TypeError, IndexError):
        return getattr(receipt, name, None)


def confirm(pending) -> Any:
    """Wait for ``pending`` and return its receipt, raising on a failed status."""
    receipt = pending.wait()
    status = _field(receipt, "status")
    if status is not None and status != STATUS_SUCCESS:
        raise RemoteCallFailure(
            f"Transaction {_hex(getattr(pending, 'tx_hash', None))} failed with status {status}",
            receipt=receipt,
        )
    return receipt


class ConfirmedTx:
    """Pending handle whose receipt is already known."""

    def __init__(self, tx_hash, receipt):
        self.tx_hash = tx_hash
        self.receipt = receipt

    def wait(self):
        return self.receipt


class TransactionSubmitter:
    """Submit an action, wait for its receipt and retry failures.

    ``max_attempts=None`` keeps retrying until a receipt confirms.
    """

    def __init__(
        self,
        max_attempts: Optional[int] = 10,
        delay: float = 1.0,
        label: str = "Transaction",
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts is not None and max_attempts < 1:
            raise InvalidArgument(f"max_attempts must be at least 1, got {max_attempts}")
        if delay < 0:
            raise InvalidArgument(f"delay must not be negative, got {delay}")
        self.max_attempts = max_attempts
        self.delay = delay
        self.label = label
        self._sleep = sleep

    def _budget(self) -> str:
        return "∞" if self.max_attempts is None else str(self.max_attempts)

    def submit(self, action: Callable[[], Any]) -> Confirmation:
        attempts: List[TransactionAttempt] = []
        last_error: Optional[BaseException] = None
        number = 0
        while self.max_attempts is None or number < self.max_attempts:
            number += 1
            attempt = TransactionAttempt(number)
            attempts.append(attempt)
            try:
                pending = action()
                log.info(f"{self.label} sent → {_hex(pending.tx_hash)}, waiting for confirmation...")
                receipt = confirm(pending)
            except InvalidArgument:
                attempt.outcome = FAILED
                raise
            except Exception as e:
                attempt.outcome = FAILED
                attempt.error = str(e)
                last_error = e
                log.warning(f"{self.label} attempt {number}/{self._budget()} failed: {e}")
                if self.max_attempts is None or number < self.max_attempts:
                    log.info(f"Retrying in {self.delay:g} seconds...")
                    self._sleep(self.delay)
                continue

            attempt.outcome = CONFIRMED
            block = _field(receipt, "blockNumber")
            log.info(f"{self.label} confirmed in block {block}")
            return Confirmation(
                tx_hash=_field(receipt, "transactionHash") or pending.tx_hash,
                block_number=block,
                status=_field(receipt, "status"),
                receipt=receipt,
                attempts=attempts,
            )

        log.error(f"{self.label} failed after {len(attempts)} attempts")
        raise SubmissionExhausted(self.label, attempts, last_error)


def try_in_order(actions: Sequence[Callable[[], Any]], labels: Sequence[str] = ()) -> Callable[[], ConfirmedTx]:
    """Combine alternative actions into one.

    Each branch is run to confirmation in turn; the first one that confirms
    wins. When all branches fail, the last error is raised as a
    :class:`RemoteCallFailure` so an outer :class:`TransactionSubmitter` can
    decide whether to go round again.
    """
    if not actions:
        raise InvalidArgument("try_in_order needs at least one action")
    names = list(labels) + [f"branch {i + 1}" for i in range(len(labels), len(actions))]

    def combined() -> ConfirmedTx:
        last_error: Optional[BaseException] = None
        for name, action in zip(names, actions):
            try:
                pending = action()
                log.info(f"{name} sent → {_hex(pending.tx_hash)}, waiting for confirmation...")
                receipt = confirm(pending)
            except InvalidArgument:
                raise
            except Exception as e:
                last_error = e
                log.warning(f"{name} failed: {e}")
                continue
            return ConfirmedTx(pending.tx_hash, receipt)
        raise RemoteCallFailure(f"All {len(actions)} alternatives failed: {last_error}") from last_error

    return combined
