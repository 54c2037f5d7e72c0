"""Error taxonomy shared by the engine and the web layer."""


class AdvisorError(Exception):
    """Base class for all recommendation errors."""


class InvalidInput(AdvisorError):
    """Risk level (or mode) from the caller is missing or out of range."""

    def __init__(self, message: str = "Invalid risk level. Please provide a value between 1 and 5.") -> None:
        super().__init__(message)
        self.message = message


class UpstreamFailure(AdvisorError):
    """The market data provider could not be reached or returned garbage."""


class PolicyConfigurationError(AdvisorError):
    """A risk level reached a tier policy it has no entry for.

    Validation happens before the policy is consulted, so this means an
    internal invariant was broken, not that the user sent bad input.
    """


class NewsFetchError(AdvisorError):
    """A single asset's news lookup failed. Handled fail-soft by the engine."""
