"""Repository for the RegistrationRecord aggregate, and its RecordStore adapter."""

from protean.exceptions import ObjectNotFoundError

from registration.device.record import RegistrationRecord
from registration.device.store import RecordStore, check_lookup_field
from registration.domain import registration


@registration.repository(part_of=RegistrationRecord)
class RegistrationRecordRepository:
    """Repository for RegistrationRecord aggregate.

    Lookups use ``query.filter`` instead of ``find_by``: a racing register can
    leave two records with one token, and ``find_by`` refuses to pick one.
    """

    def find_by_reg_id(self, reg_id: str) -> RegistrationRecord | None:
        """Find one record carrying ``reg_id``."""
        return self.find_one(reg_id=reg_id)

    def find_one(self, **filters) -> RegistrationRecord | None:
        results = self._dao.query.filter(**filters).limit(1).all()
        return results.items[0] if results.items else None

    def find_some(self, limit: int) -> list[RegistrationRecord]:
        """Return at most ``limit`` records, in provider order."""
        return self._dao.query.limit(limit).all().items


class RepositoryRecordStore(RecordStore):
    """RecordStore backed by the configured Protean provider (memory, SQLite, PostgreSQL).

    Operations need an active domain context. Every aggregate handed back is
    built fresh from the provider, so callers never hold the stored copy.
    """

    def __init__(self, domain):
        self.domain = domain

    @property
    def repository(self) -> RegistrationRecordRepository:
        return self.domain.repository_for(RegistrationRecord)

    def find_by_field(self, field: str, value) -> RegistrationRecord | None:
        check_lookup_field(field)
        return self.repository.find_one(**{field: value})

    def save(self, record: RegistrationRecord) -> None:
        self.repository.add(record)

    def delete(self, record: RegistrationRecord) -> None:
        try:
            self.repository._dao.delete(record)
        except ObjectNotFoundError:
            pass  # Already removed by a concurrent unregister

    def list(self, limit: int) -> list[RegistrationRecord]:
        return self.repository.find_some(limit)


def build_store(domain) -> RepositoryRecordStore:
    """Store handle for ``domain``. The repository is resolved on every call."""
    return RepositoryRecordStore(domain)
