"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import NOT_FOUND, Contact, FormState, new_form_state
from contactbook.domain.errors import DuplicateEmailError

__all__ = [
    "NOT_FOUND",
    "Contact",
    "DuplicateEmailError",
    "FormState",
    "new_form_state",
]
