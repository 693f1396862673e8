"""Record store port: abstract interface for registration persistence."""

from abc import ABC, abstractmethod

# Attributes a store can be queried by
LOOKUP_FIELDS = ("id", "reg_id")


class RecordStore(ABC):
    """Abstract interface for the keyed storage behind the directory.

    Each call is an independent unit of work. No call spans another, so a
    lookup followed by a write is never atomic.
    """

    @abstractmethod
    def find_by_field(self, field: str, value):
        """Return one record whose ``field`` equals ``value``, or None.

        Raises:
            ValueError: if ``field`` is not one of ``LOOKUP_FIELDS``.
        """
        ...

    @abstractmethod
    def save(self, record) -> None:
        """Persist a new record."""
        ...

    @abstractmethod
    def delete(self, record) -> None:
        """Remove a record. Removing an already-removed record is a no-op."""
        ...

    @abstractmethod
    def list(self, limit: int) -> list:
        """Return at most ``limit`` records, in no particular order."""
        ...


def check_lookup_field(field: str) -> None:
    if field not in LOOKUP_FIELDS:
        raise ValueError(f"Unknown lookup field: {field!r}")
