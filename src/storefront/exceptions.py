"""Domain-specific errors.

Both are ValidationErrors, so the Protean FastAPI handlers render them as
400 responses carrying the usual ``{field: [messages]}`` body.
"""

from protean.exceptions import ValidationError


class InsufficientStock(ValidationError):
    """A product does not hold enough stock for the requested quantity."""


class InvalidSignature(ValidationError):
    """A payment gateway signature did not match the expected HMAC."""
