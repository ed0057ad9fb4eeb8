"""Ontraport integration module."""

from collections.abc import Mapping
from dataclasses import dataclass

CONTACT_ID_KEY = "id"
CONTACT_FIRST_NAME_KEY = "firstname"
CONTACT_EMAIL_KEY = "email"


def parse_contact_id(value) -> int | None:
    """
    Return the contact id if it is usable.

    Ontraport object type ids can be 0 but actual object ids are positive
    integers, so anything that does not convert to an integer greater than 0 is
    considered absent.
    """
    if isinstance(value, bool):
        return None
    if not isinstance(value, int | float | str):
        return None
    try:
        contact_id = int(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return contact_id if contact_id > 0 else None


def _string_or_none(value) -> str | None:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Contact:
    """Ontraport contact, parsed from the payload returned by the API."""

    id: int | None = None
    first_name: str | None = None
    email: str | None = None

    @classmethod
    def from_payload(cls, payload) -> "Contact":
        """Build a contact from a raw payload, missing or malformed fields are None."""
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            id=parse_contact_id(payload.get(CONTACT_ID_KEY)),
            first_name=_string_or_none(payload.get(CONTACT_FIRST_NAME_KEY)),
            email=_string_or_none(payload.get(CONTACT_EMAIL_KEY)),
        )

    def is_valid(self, email: str) -> bool:
        """Check the contact holds exactly the expected email."""
        return self.email == email
