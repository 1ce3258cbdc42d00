"""Page render, add and delete handlers over a ContactRepository."""

import logging
import re

from contactbook.application.dto import (
    EMAIL_EXISTS_MESSAGE,
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    DuplicateEmail,
    InvalidId,
    PageView,
)
from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact, DuplicateEmailError, FormState

logger = logging.getLogger(__name__)

# Optional sign followed by decimal digits, nothing else.
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids must fit a signed 64-bit integer.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def parse_contact_id(id_param: str) -> int | None:
    """Parse a path id strictly: no surrounding whitespace, no underscores, 64-bit range."""
    if id_param is None or not _ID_PATTERN.fullmatch(id_param):
        return None
    value = int(id_param)
    if not _ID_MIN <= value <= _ID_MAX:
        return None
    return value


class ContactService:
    """Translates page/add/delete requests into registry calls and view models."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def render_page(self) -> PageView:
        """Full page with the current contacts and an empty form."""
        return PageView(contacts=self._repo.snapshot(), form=FormState())

    def get_contact(self, id_param: str) -> Contact | None:
        """Return a contact by path id, or None if the id is invalid or unknown."""
        contact_id = parse_contact_id(id_param)
        if contact_id is None:
            return None
        return self._repo.get_by_id(contact_id)

    def add_contact(self, name: str, email: str) -> ContactAdded | DuplicateEmail:
        """Add a contact. On a duplicate email, echo the submission back with an error."""
        name = name or ""
        email = email or ""
        try:
            contact = self._repo.add(name, email)
        except DuplicateEmailError:
            logger.info("Rejected contact %r: email already exists", name)
            return DuplicateEmail(
                form=FormState(
                    values={"name": name, "email": email},
                    errors={"email": EMAIL_EXISTS_MESSAGE},
                )
            )
        logger.info("Added contact id=%s", contact.id)
        return ContactAdded(contact=contact)

    def delete_contact(
        self, id_param: str
    ) -> ContactDeleted | InvalidId | ContactNotFound:
        """Delete by id taken from the request path."""
        contact_id = parse_contact_id(id_param)
        if contact_id is None:
            logger.warning("Delete rejected: invalid id %r", id_param)
            return InvalidId(id_param=id_param)

        removed = self._repo.remove_by_id(contact_id)
        if removed is None:
            logger.warning("Delete rejected: contact %s not found", contact_id)
            return ContactNotFound(contact_id=contact_id)

        logger.info("Deleted contact id=%s", removed.id)
        return ContactDeleted(contact=removed)
