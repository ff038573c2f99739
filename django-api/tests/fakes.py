"""In-memory store implementations for service unit tests."""

import uuid
from contextlib import AbstractContextManager, nullcontext
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from admissions.domain import (
    AdmissionState,
    Capacity,
    CheckIn,
    CheckInId,
    Event,
    EventId,
    ExternalEventId,
    Giveaway,
    GiveawayId,
    TxHash,
    WalletAddress,
)
from admissions.domain.errors import (
    AlreadyCheckedInError,
    DuplicateEventError,
    DuplicateGiveawayError,
    GiveawayNotFoundError,
)
from admissions.stores.interfaces import (
    CheckInStore,
    EventStore,
    GiveawayStore,
    UnitOfWork,
)


class Clock:
    """Controllable epoch-seconds clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Ticker:
    """Monotonic datetimes so ordering by timestamp is deterministic."""

    def __init__(self) -> None:
        self._current = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._current += timedelta(seconds=1)
        return self._current


class InMemoryDatabase:
    def __init__(self) -> None:
        self.events: dict[uuid.UUID, Event] = {}
        self.check_ins: list[CheckIn] = []
        self.giveaways: dict[uuid.UUID, Giveaway] = {}
        self.tick = Ticker()


class FakeUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.transactions = 0

    def atomic(self) -> AbstractContextManager:
        self.transactions += 1
        return nullcontext()


class FakeEventStore(EventStore):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def create_event(
        self,
        external_event_id: ExternalEventId,
        title: str,
        description: str | None,
        organizer: WalletAddress,
        max_attendees: Capacity | None,
    ) -> Event:
        if self.get_event_by_external_id(external_event_id) is not None:
            raise DuplicateEventError(external_event_id.value)
        now = self._db.tick()
        event = Event(
            id=EventId(uuid.uuid4()),
            external_event_id=external_event_id,
            title=title,
            description=description,
            organizer=WalletAddress(organizer.canonical),
            max_attendees=max_attendees,
            is_locked=False,
            created_at=now,
            updated_at=now,
        )
        self._db.events[event.id.value] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._db.events.get(event_id.value)

    def get_event_by_external_id(
        self, external_event_id: ExternalEventId
    ) -> Event | None:
        matches = (
            e
            for e in self._db.events.values()
            if e.external_event_id == external_event_id
        )
        return next(matches, None)

    def list_events_for_organizer(self, organizer: WalletAddress) -> list[Event]:
        events = [
            e
            for e in self._db.events.values()
            if e.organizer.canonical == organizer.canonical
        ]
        return sorted(events, key=lambda e: e.created_at, reverse=True)

    def get_admission_state(
        self, event_id: EventId, for_update: bool = False
    ) -> AdmissionState:
        event = self._db.events.get(event_id.value)
        if event is None:
            return AdmissionState(exists=False)
        return AdmissionState(
            exists=True,
            is_locked=event.is_locked,
            max_attendees=event.max_attendees,
            current_count=sum(1 for c in self._db.check_ins if c.event_id == event_id),
            external_event_id=event.external_event_id,
        )

    def lock_event(self, event_id: EventId) -> bool:
        event = self._db.events.get(event_id.value)
        if event is None or event.is_locked:
            return False
        self._db.events[event_id.value] = replace(
            event, is_locked=True, updated_at=self._db.tick()
        )
        return True


class FakeCheckInStore(CheckInStore):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def add_check_in(self, event_id: EventId, wallet: WalletAddress) -> CheckIn:
        for existing in self.list_for_event(event_id):
            if existing.wallet_address.canonical == wallet.canonical:
                raise AlreadyCheckedInError(str(event_id), wallet.canonical)
        check_in = CheckIn(
            id=CheckInId(uuid.uuid4()),
            event_id=event_id,
            wallet_address=WalletAddress(wallet.canonical),
            checked_in_at=self._db.tick(),
        )
        self._db.check_ins.append(check_in)
        return check_in

    def list_for_event(self, event_id: EventId) -> list[CheckIn]:
        rows = [c for c in self._db.check_ins if c.event_id == event_id]
        return sorted(rows, key=lambda c: c.checked_in_at)

    def count_for_event(self, event_id: EventId) -> int:
        return len(self.list_for_event(event_id))

    def count_for_wallet(self, wallet: WalletAddress) -> int:
        rows = self._db.check_ins
        return sum(1 for c in rows if c.wallet_address.canonical == wallet.canonical)


class FakeGiveawayStore(GiveawayStore):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def create_giveaway(self, event_id: EventId, winner_count: int) -> Giveaway:
        if self.get_giveaway_for_event(event_id) is not None:
            raise DuplicateGiveawayError(str(event_id))
        giveaway = Giveaway(
            id=GiveawayId(uuid.uuid4()),
            event_id=event_id,
            winner_count=winner_count,
            winners=(),
            tx_hash=None,
            executed_at=None,
            created_at=self._db.tick(),
        )
        self._db.giveaways[giveaway.id.value] = giveaway
        return giveaway

    def get_giveaway(
        self, giveaway_id: GiveawayId, for_update: bool = False
    ) -> Giveaway | None:
        return self._db.giveaways.get(giveaway_id.value)

    def get_giveaway_for_event(self, event_id: EventId) -> Giveaway | None:
        giveaways = self._db.giveaways.values()
        return next((g for g in giveaways if g.event_id == event_id), None)

    def record_result(
        self,
        giveaway_id: GiveawayId,
        winners: tuple[WalletAddress, ...],
        tx_hash: TxHash,
        executed_at: datetime,
    ) -> Giveaway:
        giveaway = self._db.giveaways.get(giveaway_id.value)
        if giveaway is None:
            raise GiveawayNotFoundError(str(giveaway_id))
        updated = replace(
            giveaway, winners=winners, tx_hash=tx_hash, executed_at=executed_at
        )
        self._db.giveaways[giveaway_id.value] = updated
        return updated
