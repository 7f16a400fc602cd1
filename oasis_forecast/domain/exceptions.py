"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PersistenceAPIError(DomainException):
    """Persistence API returned an error or is unavailable"""

    pass


class InvalidLedgerDataError(DomainException):
    """Ledger or benefit account rows are malformed"""

    pass
