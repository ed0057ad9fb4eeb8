"""Subscribe website visitors to Ontraport tags."""

import logging
from collections.abc import Iterable
from enum import StrEnum

from email_subscription import responses
from email_subscription.ontraport import Contact
from email_subscription.ontraport.client import (
    CALL_TAGGING,
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    CallStatus,
    OntraportClient,
)
from email_subscription.tools.tags import parse_tag_names

logger = logging.getLogger(__name__)

MESSAGE_INVALID_TAG = "Cannot subscribe you at this time. The subscription list being requested is invalid."
MESSAGE_RESOLUTION_FAILED = "We failed to successfully subscribe you!"
MESSAGE_TAGGING_FAILED = "Some error occurred subscribing the email to the correct list."
MESSAGE_SUBSCRIBED = "Subscribed email to the tag."


class Outcome(StrEnum):
    """Every way a subscription attempt can end."""

    UNCONFIGURED = "unconfigured"
    INVALID_TAG = "invalid_tag"
    RESOLUTION_FAILED = "resolution_failed"
    TAGGING_TRANSPORT_ERROR = "tagging_transport_error"
    TAGGING_FAILED = "tagging_failed"
    SUBSCRIBED = "subscribed"


class OntraportSubscription:
    """
    Ontraport subscription workflow.

    Tags are similar to lists for other subscription services: contacts can have
    multiple tags and campaigns target every contact holding a given tag. A
    visitor is subscribed by finding (or creating) their contact and attaching
    the requested tag to it. Only allow-listed tags can be attached so that the
    client application cannot create new tags without our consent.
    """

    def __init__(
        self,
        app_id: str | None,
        api_key: str | None,
        allowed_tags: str | Iterable[str] | None = None,
        client: OntraportClient | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: int | float | None = DEFAULT_TIMEOUT,
    ):
        """Configure the workflow, the client is built from the credentials unless given."""
        self._app_id = app_id
        self._api_key = api_key
        self.allowed_tags = parse_tag_names(allowed_tags)
        if client is None and self.is_configured:
            client = OntraportClient(app_id, api_key, api_url=api_url, timeout=timeout)
        self.client = client

    @property
    def is_configured(self) -> bool:
        """Both the App ID and the API key are required to call Ontraport."""
        return all(
            credential is not None and str(credential).strip() != "" for credential in (self._app_id, self._api_key)
        )

    def tag_is_allowed(self, tag: str) -> bool:
        """Only tags from the allow-list can be attached."""
        return tag in self.allowed_tags

    def subscribe(self, first_name: str | None, email: str, tag: str, source_location: str | None = None):
        """Subscribe the email to the tag and build the response for the client."""
        if not self.is_configured:
            logger.error("Ontraport subscription is not configured, missing App ID or API key")
            outcome = Outcome.UNCONFIGURED
        elif not self.tag_is_allowed(tag):
            logger.warning("Refused subscription to tag %r which is not allowed", tag)
            outcome = Outcome.INVALID_TAG
        else:
            outcome = self.add_contact_with_tag(first_name, email, tag, source_location)

        return self.response_for(outcome)

    def find_contact(self, email: str) -> Contact | None:
        """
        Look for an existing contact with this email.

        A failed lookup is understood as "not found".
        """
        result = self.client.search_contacts(email)
        contacts = result.data
        # TODO: merge the contacts when more than one share the same email
        if isinstance(contacts, list) and contacts:
            return Contact.from_payload(contacts[0])
        return None

    def create_contact(self, first_name: str | None, email: str, source_location: str | None) -> Contact | None:
        """Create the contact, returns None if Ontraport did not create it."""
        result = self.client.create_contact(first_name, email, source_location)
        if isinstance(result.data, dict):
            return Contact.from_payload(result.data)
        return None

    def add_contact_with_tag(self, first_name, email, tag, source_location) -> Outcome:
        """Resolve the contact then attach the tag to it."""
        contact = self.find_contact(email)
        if contact is None:
            contact = self.create_contact(first_name, email, source_location)

        if contact is None or not contact.is_valid(email) or contact.id is None:
            logger.warning("Unable to find or create the Ontraport contact of a visitor")
            logger.debug("Ontraport contact not resolved for %s", email)
            return Outcome.RESOLUTION_FAILED

        return self.assign_tag(contact, tag)

    def assign_tag(self, contact: Contact, tag: str) -> Outcome:
        """Attach the tag to the contact."""
        result = self.client.add_tag(contact.id, tag)
        if result.ok:
            logger.info("Ontraport contact %s subscribed to tag %r", contact.id, tag)
            return Outcome.SUBSCRIBED
        if result.status == CallStatus.TRANSPORT_ERROR:
            return Outcome.TAGGING_TRANSPORT_ERROR
        return Outcome.TAGGING_FAILED

    def response_for(self, outcome):
        """Map the outcome of a subscription attempt to the response sent to the client."""
        if outcome == Outcome.UNCONFIGURED:
            return responses.unconfigured()
        if outcome == Outcome.INVALID_TAG:
            return responses.with_message(MESSAGE_INVALID_TAG)
        if outcome == Outcome.RESOLUTION_FAILED:
            return responses.with_message(MESSAGE_RESOLUTION_FAILED)
        if outcome == Outcome.TAGGING_TRANSPORT_ERROR:
            return responses.transport_error(CALL_TAGGING)
        if outcome == Outcome.TAGGING_FAILED:
            return responses.with_message(MESSAGE_TAGGING_FAILED)
        if outcome == Outcome.SUBSCRIBED:
            return responses.success(MESSAGE_SUBSCRIBED)

        logger.error("Unexpected subscription outcome %r", outcome)
        return responses.unexpected()
