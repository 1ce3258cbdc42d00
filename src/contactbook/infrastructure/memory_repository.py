"""In-memory implementation of ContactRepository (no DB)."""

from collections.abc import Callable, Iterable
from threading import RLock

from contactbook.domain import NOT_FOUND, Contact, DuplicateEmailError


class InMemoryContactRegistry:
    """Stores contacts in memory. Order preserved by insertion.
    Emails are unique (exact, case-sensitive match). Ids start at 1 and are never reused.
    Every operation holds the same lock, so the registry is safe to share across request threads.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []
        self._last_id = 0
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def add(self, name: str, email: str) -> Contact:
        with self._lock:
            if self.find_index_by_email(email) != NOT_FOUND:
                raise DuplicateEmailError(email)
            self._last_id += 1
            contact = Contact(id=self._last_id, name=name, email=email)
            self._contacts.append(contact)
            return contact

    def find_index(self, predicate: Callable[[Contact], bool]) -> int:
        with self._lock:
            for index, contact in enumerate(self._contacts):
                if predicate(contact):
                    return index
            return NOT_FOUND

    def find_index_by_email(self, email: str) -> int:
        return self.find_index(lambda c: c.email == email)

    def find_index_by_id(self, contact_id: int) -> int:
        return self.find_index(lambda c: c.id == contact_id)

    def get_by_id(self, contact_id: int) -> Contact | None:
        with self._lock:
            index = self.find_index_by_id(contact_id)
            if index == NOT_FOUND:
                return None
            return self._contacts[index]

    def remove_at(self, index: int) -> Contact:
        with self._lock:
            if not 0 <= index < len(self._contacts):
                raise IndexError(f"No contact at index {index}")
            return self._contacts.pop(index)

    def remove_by_id(self, contact_id: int) -> Contact | None:
        with self._lock:
            index = self.find_index_by_id(contact_id)
            if index == NOT_FOUND:
                return None
            return self.remove_at(index)

    def snapshot(self) -> tuple[Contact, ...]:
        with self._lock:
            return tuple(self._contacts)


# Demo contacts loaded at startup.
SEED_CONTACTS: tuple[tuple[str, str], ...] = (
    ("jon", "jon@mail.ru"),
    ("bob", "bob@mail.ru"),
    ("duke", "duke@mail.ru"),
)


def seed_registry(
    registry: InMemoryContactRegistry,
    contacts: Iterable[tuple[str, str]] = SEED_CONTACTS,
) -> list[Contact]:
    """Add (name, email) pairs in order, skipping emails that already exist."""
    added = []
    for name, email in contacts:
        try:
            added.append(registry.add(name, email))
        except DuplicateEmailError:
            continue
    return added
