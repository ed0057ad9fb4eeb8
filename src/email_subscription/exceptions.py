"""Email subscription exceptions module."""


class SubscriptionError(Exception):
    """Base exception for all email subscription exceptions."""


class OntraportTransportError(SubscriptionError):
    """Exception raised when a call to the Ontraport API cannot be completed."""

    def __init__(self, call_identifier, message):
        """Keep track of the failing call."""
        super().__init__(f"{call_identifier}: {message}")
        self.call_identifier = call_identifier
