"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Owns the ordered set of contacts and enforces email uniqueness."""

    def add(self, name: str, email: str) -> Contact:
        """Assign the next id and append a contact. Raises DuplicateEmailError."""
        ...

    def find_index(self, predicate: Callable[[Contact], bool]) -> int:
        """Return the position of the first contact matching predicate, or NOT_FOUND."""
        ...

    def find_index_by_email(self, email: str) -> int:
        """Return the position of the contact with this exact email, or NOT_FOUND."""
        ...

    def find_index_by_id(self, contact_id: int) -> int:
        """Return the position of the contact with this id, or NOT_FOUND."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def remove_at(self, index: int) -> Contact:
        """Remove and return the contact at index, keeping the order of the rest."""
        ...

    def remove_by_id(self, contact_id: int) -> Contact | None:
        """Look up and remove in one step. Returns the removed contact, or None."""
        ...

    def snapshot(self) -> tuple[Contact, ...]:
        """Return all contacts in insertion order."""
        ...
