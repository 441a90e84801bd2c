"""
Domain exceptions.

Services raise these at the point a problem is detected and
never catch them. The API layer maps them to HTTP status codes.
"""


class BankingError(Exception):
    """Base exception for the banking domain."""


class NotFoundError(BankingError):
    """A referenced bank, account or transaction does not exist."""


class InvalidOperationError(BankingError):
    """The operation is not allowed, e.g. insufficient funds."""
