"""Test the throttling of the subscription endpoint."""

import logging

from rest_framework.response import Response
from rest_framework.test import APIRequestFactory
from rest_framework.views import APIView

from email_subscription.drf.throttling import SubscriptionEmailRateThrottle, SubscriptionRateThrottle
from email_subscription.views import EmailSubscriptionView


def custom_callback(message):
    """Define custom callback."""
    logging.critical(message)


class TestSubscriptionRateThrottle(SubscriptionRateThrottle):
    """Client throttle allowing one subscription per minute."""

    __test__ = False

    THROTTLE_RATES = {"test": "1/min"}


class TestSubscriptionEmailRateThrottle(SubscriptionEmailRateThrottle):
    """Email throttle allowing one subscription per minute."""

    __test__ = False

    THROTTLE_RATES = {"email_subscription_email": "1/min"}


class UnsetSubscriptionEmailRateThrottle(SubscriptionEmailRateThrottle):
    """Email throttle without rate."""

    THROTTLE_RATES = {}


class ClientMockView(APIView):
    """Testing mock view limited per client."""

    authentication_classes = []
    permission_classes = []
    throttle_classes = (TestSubscriptionRateThrottle,)
    throttle_scope = "test"

    def post(self, request):
        """Return dummy response."""
        return Response("foo")


class EmailMockView(ClientMockView):
    """Testing mock view limited per submitted email."""

    throttle_classes = (TestSubscriptionEmailRateThrottle,)


class UnsetEmailMockView(ClientMockView):
    """Testing mock view with an email throttle without rate."""

    throttle_classes = (UnsetSubscriptionEmailRateThrottle,)


def post(view, data=None, **extra):
    """Send a fresh JSON request to the view."""
    request = APIRequestFactory().post("/", data or {}, format="json", **extra)
    return view.as_view()(request)


def test_client_throttle_reports_client_and_rate(caplog):
    """The refused client and the exceeded rate are reported."""
    assert post(ClientMockView, REMOTE_ADDR="10.1.2.3").status_code == 200
    response = post(ClientMockView, REMOTE_ADDR="10.1.2.3")

    assert response.status_code == 429
    assert "Email subscription refused for client 10.1.2.3: rate 1/min exceeded for scope test" in caplog.text
    assert [record.levelname for record in caplog.records] == ["WARNING"]


def test_client_throttle_is_per_client():
    """Another client is not refused."""
    assert post(ClientMockView, REMOTE_ADDR="10.1.2.3").status_code == 200
    assert post(ClientMockView, REMOTE_ADDR="10.1.2.3").status_code == 429
    assert post(ClientMockView, REMOTE_ADDR="10.9.9.9").status_code == 200


def test_client_throttle_custom_callback(caplog, settings):
    """Test the client throttle with a custom callback."""
    settings.EMAIL_SUBSCRIPTION_THROTTLE_FAILURE_CALLBACK = "tests.drf.test_throttling.custom_callback"

    post(ClientMockView)
    response = post(ClientMockView)

    assert response.status_code == 429
    assert "Email subscription refused for client 127.0.0.1" in caplog.text
    for record in caplog.records:
        assert record.levelname == "CRITICAL"


def test_email_throttle_refuses_same_email_from_other_clients():
    """The same address is refused whatever the client sending it."""
    assert post(EmailMockView, {"email": "alice@example.com"}, REMOTE_ADDR="10.1.2.3").status_code == 200

    response = post(EmailMockView, {"email": "alice@example.com"}, REMOTE_ADDR="10.9.9.9")

    assert response.status_code == 429


def test_email_throttle_normalizes_email():
    """Case and surrounding blanks do not make a new address."""
    assert post(EmailMockView, {"email": "alice@example.com"}).status_code == 200
    assert post(EmailMockView, {"email": "  Alice@Example.COM "}).status_code == 429


def test_email_throttle_allows_other_email():
    """Another address is not refused."""
    assert post(EmailMockView, {"email": "alice@example.com"}).status_code == 200
    assert post(EmailMockView, {"email": "alice@example.com"}).status_code == 429
    assert post(EmailMockView, {"email": "bob@example.com"}).status_code == 200


def test_email_throttle_ignores_missing_email():
    """Requests without email are left to the serializer."""
    for _ in range(3):
        assert post(EmailMockView, {"first_name": "Alice"}).status_code == 200
    for _ in range(3):
        assert post(EmailMockView, {"email": "   "}).status_code == 200
    for _ in range(3):
        assert post(EmailMockView, {"email": 12}).status_code == 200


def test_email_throttle_report_hides_email(caplog):
    """The refused address is neither logged nor kept as cache key."""
    throttle = TestSubscriptionEmailRateThrottle()
    request = APIRequestFactory().post("/", {"email": "alice@example.com"}, format="json")
    post(EmailMockView, {"email": "alice@example.com"})
    response = post(EmailMockView, {"email": "alice@example.com"})

    assert response.status_code == 429
    assert "Email subscription refused for an address: rate 1/min exceeded" in caplog.text
    assert "alice@example.com" not in caplog.text

    view = EmailMockView()
    drf_request = view.initialize_request(request)
    cache_key = throttle.get_cache_key(drf_request, view)
    assert cache_key.startswith("throttle_email_subscription_email_")
    assert "alice" not in cache_key


def test_email_throttle_disabled_without_rate():
    """Without a rate for its scope, the email throttle lets everything through."""
    for _ in range(5):
        assert post(UnsetEmailMockView, {"email": "alice@example.com"}).status_code == 200


def test_subscription_endpoint_is_throttled():
    """The subscription endpoint is limited per client and per email."""
    assert EmailSubscriptionView.throttle_classes == [SubscriptionRateThrottle, SubscriptionEmailRateThrottle]
    assert EmailSubscriptionView.throttle_scope == "email_subscription"
