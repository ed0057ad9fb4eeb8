"""Serializers of the email subscription endpoint."""

from rest_framework import serializers


class SubscriptionSerializer(serializers.Serializer):
    """Validate the subscription form submitted by a visitor."""

    first_name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True, default=None)
    email = serializers.EmailField()
    tag = serializers.CharField(max_length=255)
    source_location = serializers.CharField(max_length=2048, required=False, allow_null=True, default=None)
