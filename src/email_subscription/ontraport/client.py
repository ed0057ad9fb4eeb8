"""Ontraport API client."""

import json
import logging
from dataclasses import dataclass
from enum import StrEnum

import requests

from email_subscription.exceptions import OntraportTransportError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.ontraport.com/1"
DEFAULT_TIMEOUT = 10

ENDPOINT_CONTACTS = "/Contacts"
ENDPOINT_TAGS = "/objects/tagByName"

# Identifiers of the calls, used to tell the client which one failed
CALL_LOOKUP = "Lookup"
CALL_CREATION = "Creation"
CALL_TAGGING = "Tagging"

HEADER_APP_ID = "Api-Appid"
HEADER_API_KEY = "Api-Key"

# Ontraport object type referring to contacts
OBJECT_TYPE_CONTACTS = 0

RESPONSE_CODE = "code"
RESPONSE_DATA = "data"
RESPONSE_CODE_SUCCESS = 0


class CallStatus(StrEnum):
    """Outcome category of a call to the Ontraport API."""

    SUCCESS = "success"
    UNSUCCESSFUL = "unsuccessful"
    TRANSPORT_ERROR = "transport_error"


def is_success_body(body) -> bool:
    """Successful Ontraport responses are objects carrying the code 0."""
    if not isinstance(body, dict):
        return False
    code = body.get(RESPONSE_CODE)
    return not isinstance(code, bool) and isinstance(code, int) and code == RESPONSE_CODE_SUCCESS


@dataclass(frozen=True)
class ApiResult:
    """Result of a single call to the Ontraport API."""

    call_identifier: str
    status: CallStatus
    body: object = None
    error: OntraportTransportError | None = None

    @classmethod
    def from_body(cls, call_identifier, body):
        """Categorize a decoded response body."""
        status = CallStatus.SUCCESS if is_success_body(body) else CallStatus.UNSUCCESSFUL
        return cls(call_identifier=call_identifier, status=status, body=body)

    @classmethod
    def transport_error(cls, error: OntraportTransportError):
        """Build the result of a call that could not be completed."""
        return cls(call_identifier=error.call_identifier, status=CallStatus.TRANSPORT_ERROR, error=error)

    @property
    def ok(self) -> bool:
        """Return True if Ontraport acknowledged the call."""
        return self.status == CallStatus.SUCCESS

    @property
    def data(self):
        """Payload of a successful call, None otherwise."""
        if not self.ok:
            return None
        return self.body.get(RESPONSE_DATA)


def email_condition(email: str) -> str:
    """Build the condition filtering contacts on an exact email."""
    return json.dumps(
        [
            {
                "field": {"field": "email"},
                "op": "=",
                "value": {"value": email},
            }
        ]
    )


class OntraportClient:
    """
    Client for the Ontraport REST API.

    Only the three operations needed to subscribe a visitor are supported:
    searching contacts by email, creating a contact and attaching tags by name.
    None of them raise: failures are reported through the returned ApiResult.
    """

    def __init__(
        self,
        app_id: str,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: int | float | None = DEFAULT_TIMEOUT,
    ):
        """Configure the Ontraport client."""
        self._app_id = app_id
        self._api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def _headers(self):
        return {
            HEADER_APP_ID: self._app_id,
            HEADER_API_KEY: self._api_key,
        }

    def _send(self, call_identifier, method, endpoint, **kwargs):
        """Perform the HTTP request and decode the body."""
        try:
            response = requests.request(
                method,
                f"{self.api_url}{endpoint}",
                headers=self._headers,
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as err:
            raise OntraportTransportError(call_identifier, f"Error calling Ontraport: {err}") from err

    def _call(self, call_identifier, method, endpoint, **kwargs) -> ApiResult:
        try:
            body = self._send(call_identifier, method, endpoint, **kwargs)
        except OntraportTransportError as err:
            logger.warning("Ontraport call %s failed: %s", err.call_identifier, type(err.__cause__).__name__)
            logger.debug("Ontraport call failure details: %s", err)
            return ApiResult.transport_error(err)

        result = ApiResult.from_body(call_identifier, body)
        if not result.ok:
            code = body.get(RESPONSE_CODE) if isinstance(body, dict) else None
            logger.warning("Ontraport call %s was not successful, code: %r", call_identifier, code)
        return result

    def search_contacts(self, email: str) -> ApiResult:
        """Search the contacts whose email is exactly the one given."""
        return self._call(
            CALL_LOOKUP,
            "GET",
            ENDPOINT_CONTACTS,
            params={"condition": email_condition(email)},
        )

    def create_contact(self, first_name: str | None, email: str, source_location: str | None = None) -> ApiResult:
        """Create a contact, the source location is the page the visitor subscribed from."""
        return self._call(
            CALL_CREATION,
            "POST",
            ENDPOINT_CONTACTS,
            data={
                "firstname": first_name,
                "email": email,
                "source_location": source_location,
            },
        )

    def add_tag(self, contact_id: int, tag: str) -> ApiResult:
        """Attach an existing tag, referenced by name, to a contact."""
        return self._call(
            CALL_TAGGING,
            "PUT",
            ENDPOINT_TAGS,
            json={
                "objectID": OBJECT_TYPE_CONTACTS,
                "ids": [contact_id],
                "add_names": [tag],
            },
        )
