"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} not found")
        self.product_id = product_id


class InsufficientStockError(DomainException):
    """A sale asked for more units than are on hand."""

    def __init__(self, product_id: int, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {name} "
            f"(requested {requested}, available {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class PersistenceError(Exception):
    """Stored inventory or report could not be read or written.

    Not a business failure: the application layer logs it and carries on.
    """
