"""Domain errors raised by the account ledger.

Every error carries a single human-readable message; the HTTP layer renders
it as ``{"message": ...}`` with a client-error status.
"""


class AccountServiceError(Exception):
    """Base class for all account service domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AccountServiceError):
    """Missing or malformed input (pin format, blank fields, mismatches)."""


class NotFoundError(AccountServiceError):
    """The requested account does not exist."""


class StateError(AccountServiceError):
    """The account is not in a state that allows the operation."""


class InsufficientFundsError(AccountServiceError):
    """The transaction would drive the balance below zero."""
