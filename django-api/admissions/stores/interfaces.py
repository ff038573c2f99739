"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Uniqueness violations
are reported as domain errors so services never see driver exceptions.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from admissions.domain import (
    AdmissionState,
    Capacity,
    CheckIn,
    Event,
    EventId,
    ExternalEventId,
    Giveaway,
    GiveawayId,
    TxHash,
    WalletAddress,
)


class UnitOfWork(ABC):
    """Transaction boundary shared by the stores."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager that commits on success and rolls back on error."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(
        self,
        external_event_id: ExternalEventId,
        title: str,
        description: str | None,
        organizer: WalletAddress,
        max_attendees: Capacity | None,
    ) -> Event:
        """Insert an event.

        Raises:
            DuplicateEventError: If the external id is already registered.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_external_id(
        self, external_event_id: ExternalEventId
    ) -> Event | None:
        """Return an event by its on-chain id, or None if not found."""
        ...

    @abstractmethod
    def list_events_for_organizer(self, organizer: WalletAddress) -> list[Event]:
        """Return an organizer's events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_admission_state(
        self, event_id: EventId, for_update: bool = False
    ) -> AdmissionState:
        """Return lock/capacity state with a live attendee count.

        With for_update the event row stays locked until the enclosing
        transaction ends.
        """
        ...

    @abstractmethod
    def lock_event(self, event_id: EventId) -> bool:
        """Set is_locked. Return True only if the flag changed."""
        ...


class CheckInStore(ABC):
    """Interface for check-in persistence operations."""

    @abstractmethod
    def add_check_in(self, event_id: EventId, wallet: WalletAddress) -> CheckIn:
        """Insert a check-in with a server-assigned timestamp.

        Raises:
            AlreadyCheckedInError: If (event, wallet) already exists.
        """
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[CheckIn]:
        """Return check-ins for an event ordered by checked_in_at ascending."""
        ...

    @abstractmethod
    def count_for_event(self, event_id: EventId) -> int:
        ...

    @abstractmethod
    def count_for_wallet(self, wallet: WalletAddress) -> int:
        ...


class GiveawayStore(ABC):
    """Interface for giveaway persistence operations."""

    @abstractmethod
    def create_giveaway(self, event_id: EventId, winner_count: int) -> Giveaway:
        """Insert a pending giveaway.

        Raises:
            DuplicateGiveawayError: If the event already has a giveaway.
        """
        ...

    @abstractmethod
    def get_giveaway(
        self, giveaway_id: GiveawayId, for_update: bool = False
    ) -> Giveaway | None:
        """Return a giveaway by ID, or None if not found."""
        ...

    @abstractmethod
    def get_giveaway_for_event(self, event_id: EventId) -> Giveaway | None:
        """Return the event's giveaway, or None if no draw was opened."""
        ...

    @abstractmethod
    def record_result(
        self,
        giveaway_id: GiveawayId,
        winners: tuple[WalletAddress, ...],
        tx_hash: TxHash,
        executed_at: datetime,
    ) -> Giveaway:
        """Persist winners and proof reference."""
        ...
