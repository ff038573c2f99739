"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in admissions/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from admissions.domain.value_objects import (
    Capacity,
    CheckInId,
    EventId,
    ExternalEventId,
    GiveawayId,
    TxHash,
    WalletAddress,
)


class GiveawayStatus(Enum):
    PENDING = "pending"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    external_event_id: ExternalEventId
    title: str
    description: str | None
    organizer: WalletAddress
    max_attendees: Capacity | None
    is_locked: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CheckIn:
    """Domain representation of a recorded admission."""

    id: CheckInId
    event_id: EventId
    wallet_address: WalletAddress
    checked_in_at: datetime


@dataclass(frozen=True)
class Giveaway:
    """Domain representation of a Giveaway draw."""

    id: GiveawayId
    event_id: EventId
    winner_count: int
    winners: tuple[WalletAddress, ...]
    tx_hash: TxHash | None
    executed_at: datetime | None
    created_at: datetime

    @property
    def is_finalized(self) -> bool:
        return self.executed_at is not None

    @property
    def status(self) -> GiveawayStatus:
        return GiveawayStatus.FINALIZED if self.is_finalized else GiveawayStatus.PENDING


@dataclass(frozen=True)
class AdmissionState:
    """Live view of whether an event accepts check-ins.

    current_count is read from the check-in table at query time.
    """

    exists: bool
    is_locked: bool = False
    max_attendees: Capacity | None = None
    current_count: int = 0
    external_event_id: ExternalEventId | None = None

    @property
    def is_full(self) -> bool:
        if self.max_attendees is None:
            return False
        return not self.max_attendees.admits(self.current_count)


@dataclass(frozen=True)
class EventSummary:
    """Event joined with its attendance and draw outcome."""

    event: Event
    attendee_count: int
    giveaway: Giveaway | None

    @property
    def giveaway_executed(self) -> bool:
        return self.giveaway is not None and self.giveaway.is_finalized


@dataclass(frozen=True)
class RotatingToken:
    """A check-in token valid for the current bucket (plus one grace bucket)."""

    token: str
    expires_at_ms: int
    seconds_remaining: int
    bucket_size_seconds: int
