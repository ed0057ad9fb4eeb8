"""Email subscription module."""

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty

from .handler import SUBSCRIPTION_SETTINGS, SubscriptionHandler


class DefaultSubscription(LazyObject):
    """Lazy object to handle the subscription workflow."""

    def _setup(self):
        """Configure the subscription workflow."""
        self._wrapped = subscription_handler()


subscription_handler = SubscriptionHandler()
subscription = DefaultSubscription()


@receiver(setting_changed)
def reset_subscription(*, setting, **kwargs):
    """Build the workflow again when one of its settings is overridden."""
    if setting in SUBSCRIPTION_SETTINGS:
        subscription_handler.reset()
        subscription._wrapped = empty
