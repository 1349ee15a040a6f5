"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class UserAlreadyExistsError(AccountError):
    """Raised by the store when a phone number is already registered."""
