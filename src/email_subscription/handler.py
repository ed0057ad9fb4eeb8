"""Email subscription handler."""

from django.conf import settings
from django.utils.functional import cached_property

from email_subscription.ontraport.client import DEFAULT_API_URL, DEFAULT_TIMEOUT
from email_subscription.ontraport.subscription import OntraportSubscription

# Settings used to build the subscription workflow, with their default value
SUBSCRIPTION_SETTINGS = {
    "ONTRAPORT_APP_ID": None,
    "ONTRAPORT_API_KEY": None,
    "ONTRAPORT_ALLOWED_TAGS": (),
    "ONTRAPORT_API_URL": DEFAULT_API_URL,
    "ONTRAPORT_TIMEOUT": DEFAULT_TIMEOUT,
}


class SubscriptionHandler:
    """Subscription handler managing the workflow instantiation."""

    def __init__(self, config=None):
        """Initialize the subscription handler."""
        # config is an optional dict overriding SUBSCRIPTION_SETTINGS
        # (structured like the Django settings of the same name).
        self._config = config
        self._subscription = None

    @cached_property
    def config(self):
        """Put in cache the workflow configuration from the settings."""
        config = {name: getattr(settings, name, default) for name, default in SUBSCRIPTION_SETTINGS.items()}
        if self._config is not None:
            config.update(self._config)
        return config

    def __call__(self):
        """Create if not existing the workflow and then return it."""
        if self._subscription is None:
            self._subscription = self.create_subscription(self.config)
        return self._subscription

    def reset(self):
        """Forget the workflow so that it is built again from the settings."""
        self.__dict__.pop("config", None)
        self._subscription = None

    def create_subscription(self, config):
        """Instantiate and configure the Ontraport subscription workflow."""
        return OntraportSubscription(
            app_id=config["ONTRAPORT_APP_ID"],
            api_key=config["ONTRAPORT_API_KEY"],
            allowed_tags=config["ONTRAPORT_ALLOWED_TAGS"],
            api_url=config["ONTRAPORT_API_URL"] or DEFAULT_API_URL,
            timeout=config["ONTRAPORT_TIMEOUT"],
        )
