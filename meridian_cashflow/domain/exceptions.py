"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TransactionSourceError(DomainException):
    """Transaction source returned an error or is unavailable"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass
