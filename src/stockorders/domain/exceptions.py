"""Domain-level exceptions.

Expected business failures are returned as ``Result`` values (see
``stockorders.domain.result``) and never raised.  The exceptions below are
reserved for programmer errors: code that breaks a contract no caller
should ever break at runtime.
"""


class DomainException(Exception):
    """Base class for all programmer-error exceptions."""


class InvalidIdentifierError(DomainException):
    """An identity value object was built from a non-positive integer."""


class TransactionStateError(DomainException):
    """A unit of work was used outside its Idle -> Active -> Idle protocol."""
