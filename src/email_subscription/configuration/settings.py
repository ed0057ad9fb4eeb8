"""Settings mixin for projects configured with django-configurations."""

from configurations import values

from email_subscription.ontraport.client import DEFAULT_API_URL, DEFAULT_TIMEOUT

from .values import SecretFileValue, TagListValue


class EmailSubscriptionConfiguration:
    """
    Declare the email subscription settings.

    To be mixed in the project `Configuration` class, every value is read from
    the environment variable of the same name (no `DJANGO_` prefix).
    """

    ONTRAPORT_APP_ID = SecretFileValue(None, environ_name="ONTRAPORT_APP_ID", environ_prefix=None)
    ONTRAPORT_API_KEY = SecretFileValue(None, environ_name="ONTRAPORT_API_KEY", environ_prefix=None)
    ONTRAPORT_ALLOWED_TAGS = TagListValue(environ_name="ONTRAPORT_ALLOWED_TAGS", environ_prefix=None)
    ONTRAPORT_API_URL = values.Value(DEFAULT_API_URL, environ_name="ONTRAPORT_API_URL", environ_prefix=None)
    ONTRAPORT_TIMEOUT = values.FloatValue(DEFAULT_TIMEOUT, environ_name="ONTRAPORT_TIMEOUT", environ_prefix=None)

    EMAIL_SUBSCRIPTION_CONTACT_INBOX = values.Value("", environ_name="INBOX_FOR_CONTACT_US", environ_prefix=None)
    EMAIL_SUBSCRIPTION_THROTTLE_FAILURE_CALLBACK = values.Value(
        None,
        environ_name="EMAIL_SUBSCRIPTION_THROTTLE_FAILURE_CALLBACK",
        environ_prefix=None,
    )
