"""Domain exceptions raised by the animals manager.

The manager raises these to signal invalid input or missing records.
Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "..."}}.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when an animal is missing or structurally invalid."""

    def __init__(self, message: str = "Invalid animal!") -> None:
        super().__init__(message)


class ArgumentError(DomainError):
    """Raised when a required key argument (catalog number, type) is blank."""


class NotFoundError(DomainError):
    """Raised when a well-formed request matches no stored animal."""
