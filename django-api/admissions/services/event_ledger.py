"""Event ledger: the single source of truth for whether an event admits check-ins."""

import structlog

from admissions.domain import AdmissionState, EventId
from admissions.domain.errors import EventNotFoundError
from admissions.services.inputs import parse_event_id
from admissions.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


class EventLedger:
    """Owns an event's lock flag and capacity view."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def get_admission_state(
        self, event_id: str | EventId, for_update: bool = False
    ) -> AdmissionState:
        """Return exists/locked/capacity with a live attendee count.

        Raises:
            InvalidInputError: If the event_id is not a valid UUID.
        """
        return self._store.get_admission_state(
            parse_event_id(event_id), for_update=for_update
        )

    def lock(self, event_id: str | EventId) -> None:
        """Close admissions for good. Locking a locked event is a no-op.

        Raises:
            InvalidInputError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        if self._store.lock_event(eid):
            logger.info("event_locked", event_id=str(eid))
            return
        if self._store.get_event(eid) is None:
            raise EventNotFoundError(str(eid))
