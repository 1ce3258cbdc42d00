"""Domain entities: Contact and FormState."""

from dataclasses import dataclass, field

# Sentinel index returned by registry lookups that match nothing.
NOT_FOUND = -1


@dataclass(frozen=True)
class Contact:
    """
    One address-book entry.
    A Contact is immutable once created; only the registry assigns its id.
    """

    id: int
    name: str = ""
    email: str = ""

    def __post_init__(self):
        if self.id < 1:
            raise ValueError("Contact id must be a positive integer.")


@dataclass
class FormState:
    """
    Echo of a form submission: submitted values and per-field errors.
    Both mappings always exist, empty on success.
    """

    values: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)


def new_form_state() -> FormState:
    return FormState()
