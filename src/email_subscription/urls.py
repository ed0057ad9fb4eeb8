"""Email subscription URLs."""

from django.urls import path

from .views import EmailSubscriptionView

urlpatterns = [
    path("email-subscription/", EmailSubscriptionView.as_view(), name="email_subscription"),
]
