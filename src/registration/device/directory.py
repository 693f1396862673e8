"""RegistrationDirectory: idempotent register/unregister and bounded listing.

The directory consults the record store with a lookup followed by a separate
write. The two steps are NOT atomic: two concurrent ``register`` calls for the
same token can both see it absent and both insert it, and an ``unregister``
racing a ``register`` can interleave either way. This race is accepted
behavior; callers needing strict uniqueness must dedupe on read.
"""

import structlog
from protean.exceptions import ValidationError

from registration.device.record import RegistrationRecord
from registration.device.store import RecordStore

logger = structlog.get_logger(__name__)

# Largest page a single list call returns (the legacy endpoint took an int32)
MAX_LIST_COUNT = 2**31 - 1


class RegistrationDirectory:
    """Directory of push tokens backed by a ``RecordStore``.

    Holds no state of its own between calls. Store failures propagate to the
    caller unchanged and are never retried.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def register(self, reg_id: str) -> None:
        """Register a device token. Registering a known token is a no-op."""
        if self._find_by_reg_id(reg_id) is not None:
            logger.info("device_already_registered", reg_id=reg_id)
            return

        record = RegistrationRecord(reg_id=reg_id)
        self.store.save(record)
        logger.info("device_registered", reg_id=reg_id, record_id=record.id)

    def unregister(self, reg_id: str) -> None:
        """Remove a device token. Unregistering an unknown token is a no-op."""
        record = self._find_by_reg_id(reg_id)
        if record is None:
            logger.info("device_not_registered", reg_id=reg_id)
            return

        self.store.delete(record)
        logger.info("device_unregistered", reg_id=reg_id, record_id=record.id)

    def _find_by_reg_id(self, reg_id: str) -> RegistrationRecord | None:
        return self.store.find_by_field("reg_id", reg_id)

    def list(self, count: int) -> list[RegistrationRecord]:
        """Return up to ``count`` registered devices, in store-defined order."""
        if count < 0:
            raise ValidationError({"count": ["must be greater than or equal to 0"]})
        if count == 0:
            return []
        count = min(count, MAX_LIST_COUNT)

        records = self.store.list(count)
        logger.debug("devices_listed", requested=count, returned=len(records))
        return records
