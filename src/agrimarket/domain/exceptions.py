"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the CLI
layer can catch them uniformly and show the message verbatim.  Each
carries a ``reason_code`` that callers can branch on without parsing
the message.

InternalError is deliberately *not* a DomainException: it signals a
store or infrastructure failure whose detail must not reach the caller.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    reason_code = "error"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    reason_code = "invalid"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    reason_code = "not-found"


class AuthorizationError(DomainException):
    """The caller is not allowed to act on this resource."""

    reason_code = "forbidden"


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds the product's current stock."""

    reason_code = "insufficient-stock"

    def __init__(self, product_name: str, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name}. Available: {available} kg"
        )
        self.product_name = product_name
        self.available = available


class OrderAlreadyCompletedError(ValidationError):
    """The order has already been marked as done."""

    reason_code = "already-completed"


class InternalError(Exception):
    """A store or infrastructure operation failed."""
