"""
Domain exceptions.

Services raise these; the API layer turns them into HTTP
responses using the status_code each one carries. They derive
from ValueError so callers that only care about "bad input"
can keep catching ValueError.
"""


class BankError(ValueError):
    """Base class for every error surfaced to API clients."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Authentication ---

class AuthError(BankError):
    status_code = 401
    default_message = "Authentication error"


class MissingCredential(AuthError):
    """No bearer token was supplied."""
    status_code = 401
    default_message = "Access denied. No token provided."


class InvalidCredential(AuthError):
    """The token is malformed, expired, or signed with another secret."""
    status_code = 403
    default_message = "Invalid token"


class InvalidCredentials(AuthError):
    """
    Login failed.

    Unknown email and wrong password share this error and its
    message, so the response never reveals whether a user exists.
    """
    status_code = 400
    default_message = "Invalid credentials"


# --- Validation ---

class ValidationError(BankError):
    status_code = 400
    default_message = "Invalid request"


class InvalidAmount(ValidationError):
    default_message = (
        "Amount must be a positive value with at most two decimal places"
    )


class SameAccountTransfer(ValidationError):
    default_message = "Cannot transfer to the same account"


# --- Lookup ---

class NotFoundError(BankError):
    status_code = 404
    default_message = "Not found"


class UserNotFound(NotFoundError):
    default_message = "User not found"


class AccountNotFound(NotFoundError):
    default_message = "Account not found"


# --- Business rules ---

class InsufficientFunds(BankError):
    status_code = 400
    default_message = "Insufficient funds"
