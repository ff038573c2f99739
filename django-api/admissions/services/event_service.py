"""Event service - registering events and serving summaries.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import structlog

from admissions.domain import Event, EventSummary, ExternalEventId, WalletAddress
from admissions.domain.errors import EventNotFoundError, InvalidInputError
from admissions.services.inputs import (
    parse_capacity,
    parse_external_event_id,
    parse_wallet,
)
from admissions.stores.interfaces import CheckInStore, EventStore, GiveawayStore

logger = structlog.get_logger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self, events: EventStore, check_ins: CheckInStore, giveaways: GiveawayStore
    ) -> None:
        self._events = events
        self._check_ins = check_ins
        self._giveaways = giveaways

    def create_event(
        self,
        external_event_id: int | str,
        title: str,
        organizer: str,
        description: str | None = None,
        max_attendees: int | None = None,
    ) -> Event:
        """Register the off-chain record of an on-chain event.

        Raises:
            InvalidInputError: If any field is malformed.
            DuplicateEventError: If the external id is already registered.
        """
        ext_id = parse_external_event_id(external_event_id)
        owner = parse_wallet(organizer, field="organizer")
        capacity = parse_capacity(max_attendees)
        title = (title or "").strip()
        if not title:
            raise InvalidInputError("title", "must not be empty")

        event = self._events.create_event(ext_id, title, description, owner, capacity)
        logger.info(
            "event_created",
            event_id=str(event.id),
            external_event_id=ext_id.value,
            organizer=owner.canonical,
            max_attendees=capacity.value if capacity else None,
        )
        return event

    def get_summary(
        self, external_event_id: int | str | ExternalEventId
    ) -> EventSummary:
        """Return the event with its live attendee count and draw outcome.

        Raises:
            InvalidInputError: If the external id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        ext_id = parse_external_event_id(external_event_id)
        event = self._events.get_event_by_external_id(ext_id)
        if event is None:
            raise EventNotFoundError(str(ext_id))
        return EventSummary(
            event=event,
            attendee_count=self._check_ins.count_for_event(event.id),
            giveaway=self._giveaways.get_giveaway_for_event(event.id),
        )

    def list_for_organizer(self, organizer: str | WalletAddress) -> list[Event]:
        """Return an organizer's events, newest first."""
        owner = parse_wallet(organizer, field="organizer")
        return self._events.list_events_for_organizer(owner)
