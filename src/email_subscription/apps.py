"""Email subscription application."""

from django.apps import AppConfig


class EmailSubscriptionConfig(AppConfig):
    """Configuration of the email subscription application."""

    name = "email_subscription"
    verbose_name = "Email subscription"
