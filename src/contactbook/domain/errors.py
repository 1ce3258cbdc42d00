"""Domain errors raised by the registry."""


class DuplicateEmailError(Exception):
    """An existing contact already uses this email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already exists: {email!r}")
        self.email = email
