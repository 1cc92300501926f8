"""
Domain errors.

Every error derives from ValueError so the API layer can keep
a single ``except ValueError`` branch that rolls back the session
and answers 400. NotFoundError is the one case routed to 404.
"""


class BookkeepingError(ValueError):
    """Base class for all domain errors."""


class ValidationError(BookkeepingError):
    """A required field is missing or a value is malformed."""


class ImbalancedEntryError(ValidationError):
    """Total debits and total credits of an entry differ."""


class InvalidTxnError(ValidationError):
    """An inventory transaction is missing required data."""


class InsufficientStockError(InvalidTxnError):
    """A sale would take an item below zero while backorders are off."""


class InvalidInputError(ValidationError):
    """Bad arguments to a pure calculation."""


class NotFoundError(BookkeepingError):
    """A referenced row does not exist."""
