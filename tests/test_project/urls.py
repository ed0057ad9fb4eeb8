"""Test project URL configuration."""

from django.urls import include, path

from email_subscription.urls import urlpatterns as email_subscription_urls

urlpatterns = [
    path("", include(email_subscription_urls)),
]
