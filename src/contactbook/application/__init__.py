"""Application layer: use cases, ports, and view models. Depends only on domain."""

from contactbook.application.contact_service import ContactService, parse_contact_id
from contactbook.application.dto import (
    CONTACT_NOT_FOUND_MESSAGE,
    EMAIL_EXISTS_MESSAGE,
    INVALID_ID_MESSAGE,
    TEMPLATE_FORM,
    TEMPLATE_INDEX,
    TEMPLATE_OOB_CONTACT,
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    DuplicateEmail,
    Fragment,
    InvalidId,
    PageView,
)
from contactbook.application.ports import ContactRepository

__all__ = [
    "CONTACT_NOT_FOUND_MESSAGE",
    "EMAIL_EXISTS_MESSAGE",
    "INVALID_ID_MESSAGE",
    "TEMPLATE_FORM",
    "TEMPLATE_INDEX",
    "TEMPLATE_OOB_CONTACT",
    "ContactAdded",
    "ContactDeleted",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "DuplicateEmail",
    "Fragment",
    "InvalidId",
    "PageView",
    "parse_contact_id",
]
