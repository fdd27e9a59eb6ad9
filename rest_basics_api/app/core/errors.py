"""
Domain errors raised by the service layer.

They subclass ``ValueError`` so callers that only care about "the
operation was rejected" can keep catching ``ValueError``; endpoints
map each one to an HTTP status.
"""


class UserNotFoundError(ValueError):
    """Raised when no user has the requested id."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class InvalidAmountError(ValueError):
    """Raised when a deposit or withdrawal amount is not a positive number."""


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the current balance."""

    def __init__(self, message: str = "Insufficient funds") -> None:
        super().__init__(message)
