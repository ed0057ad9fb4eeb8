"""Standardized JSON responses returned to the subscription form."""

from http import HTTPStatus

from django.conf import settings
from django.http import JsonResponse

# Standard json key for the client that holds messages about the subscription
OUT_EMAIL_SUBSCRIPTION_MESSAGE = "email_subscription_message"

OUT_STATUS = "status"
OUT_MESSAGE = "message"
OUT_STATUS_SUCCESS = "success"


def _contact_inbox():
    return getattr(settings, "EMAIL_SUBSCRIPTION_CONTACT_INBOX", "") or ""


def _error_response(messages, status):
    return JsonResponse({OUT_EMAIL_SUBSCRIPTION_MESSAGE: messages}, status=status)


def _with_hint(message):
    return f"{message} ... Please let us know at {_contact_inbox()}"


def with_message(message: str, status: int = HTTPStatus.INTERNAL_SERVER_ERROR) -> JsonResponse:
    """Inform the client about the error that occurred."""
    return _error_response([_with_hint(message)], status)


def unconfigured() -> JsonResponse:
    """Response sent when the subscription service is missing its settings."""
    return with_message("Oh no! Looks like we haven't correctly configured our subscription service.")


def transport_error(call_identifier: str) -> JsonResponse:
    """
    Response sent when a call to the subscription service could not be completed.

    The call identifier tells which remote call failed.
    """
    return _error_response(
        [
            f"{call_identifier}: Error contacting our subscription service, please try again, "
            f"if this persists, please let us know at {_contact_inbox()}"
        ],
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )


def unexpected() -> JsonResponse:
    """Fallback response, should never actually make it to the client."""
    return _error_response(
        [f"We made a mistake trying to subscribe you to our list, please let us know at {_contact_inbox()}"],
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )


def validation_error(errors: dict) -> JsonResponse:
    """Report the fields of the request body which did not validate."""
    messages = []
    for field, field_errors in errors.items():
        if not isinstance(field_errors, list | tuple):
            field_errors = [field_errors]
        messages.extend(_with_hint(f"{field}: {error}") for error in field_errors)
    return _error_response(messages, HTTPStatus.BAD_REQUEST)


def success(message: str) -> JsonResponse:
    """Confirm the subscription."""
    return JsonResponse({OUT_STATUS: OUT_STATUS_SUCCESS, OUT_MESSAGE: message}, status=HTTPStatus.OK)
