"""Error kinds shared by the Moneytree scripts."""


class MoneytreeError(Exception):
    """Base class for every error a script reports to the operator."""


class ConfigError(MoneytreeError):
    """Missing or invalid configuration (.env keys, network, artifacts)."""


class InvalidArgument(MoneytreeError, ValueError):
    """Malformed operator input. Never retried."""


class RemoteCallFailure(MoneytreeError):
    """A remote call raised, or its receipt reported a failed status."""

    def __init__(self, message, receipt=None):
        super().__init__(message)
        self.receipt = receipt


class SubmissionExhausted(MoneytreeError):
    """Every attempt allowed by the retry budget failed."""

    def __init__(self, label, attempts, last_error):
        self.label = label
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"{label} failed after {len(attempts)} attempts: {last_error}"
        )


class InsufficientBalance(MoneytreeError):
    """The operator's wallet cannot cover the requested amount or fee."""
