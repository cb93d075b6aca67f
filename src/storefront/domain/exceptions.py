"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly and turn them
into user-facing notices.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with nothing in the cart."""

    def __init__(self) -> None:
        super().__init__("Your cart is empty!")


class MissingAddressFieldError(ValidationError):
    """A required shipping address field is blank."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Please fill in the {field_name} field")
        self.field_name = field_name


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderGatewayError(DomainException):
    """The order endpoint could not be reached or returned an unusable reply.

    The message is diagnostic detail for logs only; it is never shown
    to the customer.
    """
