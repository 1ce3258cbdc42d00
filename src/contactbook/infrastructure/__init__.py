"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import (
    SEED_CONTACTS,
    InMemoryContactRegistry,
    seed_registry,
)

__all__ = [
    "SEED_CONTACTS",
    "InMemoryContactRegistry",
    "seed_registry",
]
