"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    external_event_id = models.PositiveBigIntegerField(unique=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    organizer = models.CharField(max_length=42, db_index=True)
    max_attendees = models.PositiveIntegerField(blank=True, null=True)
    is_locked = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_idx"),
        ]

    def __str__(self) -> str:
        return f"#{self.external_event_id} {self.title}"


class CheckIn(models.Model):
    """Persistence model for attendee check-ins."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="check_ins")
    wallet_address = models.CharField(max_length=42)
    checked_in_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["checked_in_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "wallet_address"],
                name="unique_check_in_per_wallet",
            ),
        ]
        indexes = [
            models.Index(
                fields=["event", "checked_in_at"], name="checkin_event_time_idx"
            ),
            models.Index(fields=["wallet_address"], name="checkin_wallet_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.wallet_address} @ {self.event_id}"


class Giveaway(models.Model):
    """Persistence model for giveaway draws."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.OneToOneField(
        Event, on_delete=models.CASCADE, related_name="giveaway"
    )
    winner_count = models.PositiveIntegerField()
    winners = models.JSONField(default=list, blank=True)
    tx_hash = models.CharField(max_length=66, blank=True, null=True)
    executed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        state = "finalized" if self.executed_at else "pending"
        return f"Giveaway for {self.event_id} ({state})"
