"""View models and handler results passed from ContactService to the web layer."""

from dataclasses import dataclass, field
from typing import Any

from contactbook.domain import Contact, FormState

TEMPLATE_INDEX = "index"
TEMPLATE_FORM = "form"
TEMPLATE_OOB_CONTACT = "oob-contact"

EMAIL_EXISTS_MESSAGE = "Email already exists"
INVALID_ID_MESSAGE = "Invalid id"
CONTACT_NOT_FOUND_MESSAGE = "Contact not found"


@dataclass(frozen=True)
class Fragment:
    """One renderable unit: a logical template name and the data it renders."""

    template: str
    data: Any


@dataclass(frozen=True)
class PageView:
    """Full page: every contact plus an empty form."""

    contacts: tuple[Contact, ...]
    form: FormState = field(default_factory=FormState)

    status_code = 200

    @property
    def fragments(self) -> list[Fragment]:
        return [Fragment(TEMPLATE_INDEX, self)]


@dataclass(frozen=True)
class ContactAdded:
    contact: Contact

    status_code = 200

    @property
    def fragments(self) -> list[Fragment]:
        # Form reset first, then the contact appended out-of-band.
        return [
            Fragment(TEMPLATE_FORM, FormState()),
            Fragment(TEMPLATE_OOB_CONTACT, self.contact),
        ]


@dataclass(frozen=True)
class DuplicateEmail:
    form: FormState

    status_code = 400

    @property
    def fragments(self) -> list[Fragment]:
        return [Fragment(TEMPLATE_FORM, self.form)]


@dataclass(frozen=True)
class ContactDeleted:
    contact: Contact

    status_code = 204


@dataclass(frozen=True)
class InvalidId:
    id_param: str
    message: str = INVALID_ID_MESSAGE

    status_code = 400


@dataclass(frozen=True)
class ContactNotFound:
    contact_id: int
    message: str = CONTACT_NOT_FOUND_MESSAGE

    status_code = 400
