from __future__ import annotations

from rest_framework import serializers


class EventCreateSerializer(serializers.Serializer):
    """Create payload.

    ``title`` is optional; blank or whitespace-only titles fall back to the
    configured default title.
    """

    title = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )


class EventCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    link = serializers.CharField()


class EventDetailSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    createdAt = serializers.CharField()  # noqa: N815
    participantCount = serializers.IntegerField()  # noqa: N815
    slotTotals = serializers.ListField(child=serializers.IntegerField())  # noqa: N815
    shareLink = serializers.CharField(required=False)  # noqa: N815


class GridSerializer(serializers.Serializer):
    days = serializers.IntegerField()
    slotsPerDay = serializers.IntegerField()  # noqa: N815
    totalSlots = serializers.IntegerField()  # noqa: N815
    dayStartMinutes = serializers.IntegerField()  # noqa: N815
    dayEndMinutes = serializers.IntegerField()  # noqa: N815
    slotDurationMinutes = serializers.IntegerField()  # noqa: N815
    submissionQuiescenceMs = serializers.IntegerField()  # noqa: N815
