# hr_core/common/errors.py
"""
Domain error taxonomy.

Services raise these; the API layer maps them onto the error envelope
(see hr_core.common.api.exceptions).
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    code = "error"
    default_message = "Request failed."

    def __init__(self, message: str | None = None, *, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class NotFound(DomainError):
    code = "not_found"
    default_message = "Not found."


class InvalidTransition(DomainError):
    """The entity exists but is not in a state that allows the operation."""
    code = "invalid_transition"
    default_message = "Invalid state transition."


class Conflict(DomainError):
    """A uniqueness rule would be broken (duplicate pending consent, occupied bed...)."""
    code = "conflict"
    default_message = "Conflict."


class AccessDenied(DomainError):
    code = "permission_denied"
    default_message = "Access denied."


class ValidationError(DomainError):
    code = "validation_error"
    default_message = "Invalid input."
