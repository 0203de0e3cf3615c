"""Host adapters."""

from .memory import InMemoryWorld, ReadOnlyFlags

__all__ = ["InMemoryWorld", "ReadOnlyFlags"]
