"""Email subscription views."""

import logging

from rest_framework.views import APIView

from email_subscription import responses, subscription
from email_subscription.drf.throttling import SubscriptionEmailRateThrottle, SubscriptionRateThrottle
from email_subscription.serializers import SubscriptionSerializer

logger = logging.getLogger(__name__)


class EmailSubscriptionView(APIView):
    """
    Subscribe a visitor to a mailing list.

    The endpoint is public: it is called by the subscription forms of the
    website, anonymously.
    """

    http_method_names = ["post"]
    authentication_classes = []
    permission_classes = []
    throttle_classes = [SubscriptionRateThrottle, SubscriptionEmailRateThrottle]
    throttle_scope = "email_subscription"

    def post(self, request):
        """Validate the form then let the workflow subscribe the visitor."""
        serializer = SubscriptionSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Invalid subscription request: %s", serializer.errors)
            return responses.validation_error(serializer.errors)

        return subscription.subscribe(
            first_name=serializer.validated_data["first_name"] or None,
            email=serializer.validated_data["email"],
            tag=serializer.validated_data["tag"],
            source_location=serializer.validated_data["source_location"],
        )
