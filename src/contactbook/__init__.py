"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact, FormState) and DuplicateEmailError. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), view models.
- infrastructure: adapters (InMemoryContactRegistry).
"""

from contactbook.application import (
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    ContactRepository,
    ContactService,
    DuplicateEmail,
    Fragment,
    InvalidId,
    PageView,
)
from contactbook.domain import NOT_FOUND, Contact, DuplicateEmailError, FormState
from contactbook.infrastructure import InMemoryContactRegistry, seed_registry

__all__ = [
    "NOT_FOUND",
    "Contact",
    "ContactAdded",
    "ContactDeleted",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "DuplicateEmail",
    "DuplicateEmailError",
    "FormState",
    "Fragment",
    "InMemoryContactRegistry",
    "InvalidId",
    "PageView",
    "seed_registry",
]
