"""Throttling of the subscription endpoint."""

import hashlib
from logging import getLogger

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.throttling import ScopedRateThrottle, SimpleRateThrottle

logger = getLogger("email_subscription.drf.throttling")


def report_throttle_failure(message):
    """Send the message to the configured callback, or log a warning."""
    callback_path = getattr(settings, "EMAIL_SUBSCRIPTION_THROTTLE_FAILURE_CALLBACK", None)
    if callback_path is None:
        logger.warning(message)
        return

    callback = import_string(callback_path)
    callback(message)


class SubscriptionRateThrottle(ScopedRateThrottle):
    """
    Limit the subscriptions sent by one client.

    The refused client and the rate it exceeded are reported, to tell a form
    resubmitted by a visitor apart from a script feeding it with addresses.
    """

    client_ident = None

    def allow_request(self, request, view):
        """Remember which client is asking before checking its history."""
        self.client_ident = self.get_ident(request)
        return super().allow_request(request, view)

    def throttle_failure(self):
        """Report the refused client."""
        report_throttle_failure(
            f"Email subscription refused for client {self.client_ident}: "
            f"rate {self.rate} exceeded for scope {self.scope}"
        )
        return super().throttle_failure()


class SubscriptionEmailRateThrottle(SimpleRateThrottle):
    """
    Limit the subscriptions sent for one email address, whatever the client.

    The address is hashed before being used as cache key and never reported.
    The throttle is disabled when no rate is set for its scope.
    """

    scope = "email_subscription_email"

    def get_rate(self):
        """Return the rate of the scope, None when it is not configured."""
        return self.THROTTLE_RATES.get(self.scope)

    def get_cache_key(self, request, view):
        """Key the history on the normalized submitted email."""
        email = request.data.get("email") if hasattr(request.data, "get") else None
        if not isinstance(email, str) or not email.strip():
            return None

        digest = hashlib.sha256(email.strip().lower().encode()).hexdigest()
        return self.cache_format % {"scope": self.scope, "ident": digest}

    def throttle_failure(self):
        """Report the refusal, without the address."""
        report_throttle_failure(
            f"Email subscription refused for an address: rate {self.rate} exceeded for scope {self.scope}"
        )
        return super().throttle_failure()
