"""Serializers for request parsing and for rendering domain models.

Request serializers check presence and basic types (400 on failure).
Domain rules are enforced by the services.
"""

from rest_framework import serializers

from admissions.domain.value_objects import MAX_COUNT, MAX_EXTERNAL_EVENT_ID


class CheckInRequestSerializer(serializers.Serializer):
    eventId = serializers.CharField()
    walletAddress = serializers.CharField()
    token = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class GiveawayCreateRequestSerializer(serializers.Serializer):
    eventId = serializers.CharField()
    winnerCount = serializers.IntegerField(min_value=1, max_value=MAX_COUNT)


class GiveawayFinalizeRequestSerializer(serializers.Serializer):
    giveawayId = serializers.CharField()
    winners = serializers.ListField(child=serializers.CharField(), allow_empty=False)
    txHash = serializers.CharField()


class EventCreateRequestSerializer(serializers.Serializer):
    externalEventId = serializers.IntegerField(
        min_value=1, max_value=MAX_EXTERNAL_EVENT_ID
    )
    title = serializers.CharField(max_length=255)
    organizer = serializers.CharField()
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    maxAttendees = serializers.IntegerField(
        required=False, allow_null=True, min_value=0, max_value=MAX_COUNT
    )


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    external_event_id = serializers.IntegerField(source="external_event_id.value")
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    organizer = serializers.CharField(source="organizer.value")
    max_attendees = serializers.SerializerMethodField()
    is_locked = serializers.BooleanField()
    created_at = serializers.DateTimeField()

    def get_max_attendees(self, event) -> int | None:
        return event.max_attendees.value if event.max_attendees is not None else None


class CheckInSerializer(serializers.Serializer):
    """Serializer for CheckIn domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    wallet_address = serializers.CharField(source="wallet_address.value")
    checked_in_at = serializers.DateTimeField()


class GiveawaySerializer(serializers.Serializer):
    """Serializer for Giveaway domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    winner_count = serializers.IntegerField()
    winners = serializers.SerializerMethodField()
    tx_hash = serializers.SerializerMethodField()
    executed_at = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField()
    status = serializers.CharField(source="status.value")

    def get_winners(self, giveaway) -> list[str]:
        return [w.value for w in giveaway.winners]

    def get_tx_hash(self, giveaway) -> str | None:
        return giveaway.tx_hash.value if giveaway.tx_hash is not None else None


class EventSummarySerializer(serializers.Serializer):
    """Event flattened with attendance and draw outcome."""

    def to_representation(self, summary):
        data = dict(EventSerializer(summary.event).data)
        data["attendee_count"] = summary.attendee_count
        data["giveaway_executed"] = summary.giveaway_executed
        giveaway = summary.giveaway
        data["giveaway"] = GiveawaySerializer(giveaway).data if giveaway else None
        return data


class RotatingTokenSerializer(serializers.Serializer):
    token = serializers.CharField()
    expiresAt = serializers.IntegerField(source="expires_at_ms")
    secondsRemaining = serializers.IntegerField(source="seconds_remaining")
    bucketSizeSeconds = serializers.IntegerField(source="bucket_size_seconds")
