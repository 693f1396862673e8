"""RegistrationRecord aggregate: one registered push token.

A record is created when a device registers a token that is not yet in the
directory and deleted when the device unregisters. There is no update path.
"""

from protean.fields import String

from registration.domain import registration

# FCM/APNs tokens are well under this; the field is sized for opaque tokens
REG_ID_MAX_LENGTH = 4096


@registration.aggregate
class RegistrationRecord:
    """A device's push-notification token as stored in the directory.

    ``reg_id`` is the business key but is deliberately not declared unique:
    at-most-one-record-per-token is enforced by ``RegistrationDirectory``.
    Tokens are opaque and stored without sanitization.
    """

    reg_id: String(max_length=REG_ID_MAX_LENGTH, sanitize=False)

    def to_wire(self) -> dict:
        """Client-facing representation, using the mobile contract's names."""
        return {"id": str(self.id), "regId": self.reg_id}
