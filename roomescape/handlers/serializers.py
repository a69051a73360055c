"""Serializers for request bodies and domain model responses.

Input serializers check shape only (required keys, primitive types); domain
validation happens in the value objects.
"""

from rest_framework import serializers


class ReservationTimeSerializer(serializers.Serializer):
    """Serializer for ReservationTime domain model."""

    id = serializers.IntegerField(source="id.value")
    startAt = serializers.TimeField(source="start_at", format="%H:%M")


class ThemeSerializer(serializers.Serializer):
    """Serializer for Theme domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField(source="name.value")
    description = serializers.CharField(source="description.value")
    thumbnail = serializers.CharField()


class ReservationSerializer(serializers.Serializer):
    """Serializer for Reservation domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField(source="client_name.value")
    date = serializers.DateField(source="date.value")
    time = ReservationTimeSerializer()
    theme = ThemeSerializer()


class ReservationRequestSerializer(serializers.Serializer):
    date = serializers.CharField(trim_whitespace=False)
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    timeId = serializers.CharField()
    themeId = serializers.CharField()


class ThemeRequestSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    thumbnail = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ReservationTimeRequestSerializer(serializers.Serializer):
    startAt = serializers.CharField()
