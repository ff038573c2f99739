"""Django ORM implementation of the admission stores."""

from contextlib import AbstractContextManager
from datetime import datetime

from django.db import IntegrityError, transaction
from django.utils import timezone

from admissions import models
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


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        external_event_id=ExternalEventId(row.external_event_id),
        title=row.title,
        description=row.description,
        organizer=WalletAddress(row.organizer),
        max_attendees=(
            Capacity(row.max_attendees) if row.max_attendees is not None else None
        ),
        is_locked=row.is_locked,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_check_in(row: models.CheckIn) -> CheckIn:
    return CheckIn(
        id=CheckInId(row.id),
        event_id=EventId(row.event_id),
        wallet_address=WalletAddress(row.wallet_address),
        checked_in_at=row.checked_in_at,
    )


def _to_giveaway(row: models.Giveaway) -> Giveaway:
    return Giveaway(
        id=GiveawayId(row.id),
        event_id=EventId(row.event_id),
        winner_count=row.winner_count,
        winners=tuple(WalletAddress(w) for w in row.winners or ()),
        tx_hash=TxHash(row.tx_hash) if row.tx_hash else None,
        executed_at=row.executed_at,
        created_at=row.created_at,
    )


class DjangoUnitOfWork(UnitOfWork):
    """Transactions via django.db.transaction.atomic."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM."""

    def create_event(
        self,
        external_event_id: ExternalEventId,
        title: str,
        description: str | None,
        organizer: WalletAddress,
        max_attendees: Capacity | None,
    ) -> Event:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(
                    external_event_id=external_event_id.value,
                    title=title,
                    description=description,
                    organizer=organizer.canonical,
                    max_attendees=max_attendees.value if max_attendees else None,
                )
        except IntegrityError as exc:
            raise DuplicateEventError(external_event_id.value) from exc
        return _to_event(row)

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_event_by_external_id(
        self, external_event_id: ExternalEventId
    ) -> Event | None:
        rows = models.Event.objects.filter(external_event_id=external_event_id.value)
        row = rows.first()
        return _to_event(row) if row else None

    def list_events_for_organizer(self, organizer: WalletAddress) -> list[Event]:
        rows = models.Event.objects.filter(organizer__iexact=organizer.value)
        rows = rows.order_by("-created_at")
        return [_to_event(row) for row in rows]

    def get_admission_state(
        self, event_id: EventId, for_update: bool = False
    ) -> AdmissionState:
        qs = models.Event.objects.filter(pk=event_id.value)
        if for_update:
            qs = qs.select_for_update()
        row = qs.values("external_event_id", "is_locked", "max_attendees").first()
        if row is None:
            return AdmissionState(exists=False)
        check_ins = models.CheckIn.objects.filter(event_id=event_id.value)

        max_attendees = row["max_attendees"]
        return AdmissionState(
            exists=True,
            is_locked=row["is_locked"],
            max_attendees=(
                Capacity(max_attendees) if max_attendees is not None else None
            ),
            current_count=check_ins.count(),
            external_event_id=ExternalEventId(row["external_event_id"]),
        )

    def lock_event(self, event_id: EventId) -> bool:
        # update() bypasses auto_now
        rows = models.Event.objects.filter(pk=event_id.value, is_locked=False)
        changed = rows.update(is_locked=True, updated_at=timezone.now())
        return changed > 0


class DjangoCheckInStore(CheckInStore):
    """Check-in store; the unique constraint is the duplicate guard."""

    def add_check_in(self, event_id: EventId, wallet: WalletAddress) -> CheckIn:
        try:
            with transaction.atomic():
                row = models.CheckIn.objects.create(
                    event_id=event_id.value,
                    wallet_address=wallet.canonical,
                )
        except IntegrityError as exc:
            raise AlreadyCheckedInError(str(event_id), wallet.canonical) from exc
        return _to_check_in(row)

    def list_for_event(self, event_id: EventId) -> list[CheckIn]:
        rows = models.CheckIn.objects.filter(event_id=event_id.value)
        rows = rows.order_by("checked_in_at", "id")
        return [_to_check_in(row) for row in rows]

    def count_for_event(self, event_id: EventId) -> int:
        return models.CheckIn.objects.filter(event_id=event_id.value).count()

    def count_for_wallet(self, wallet: WalletAddress) -> int:
        return models.CheckIn.objects.filter(wallet_address=wallet.canonical).count()


class DjangoGiveawayStore(GiveawayStore):
    """Giveaway store; one row per event via OneToOneField."""

    def create_giveaway(self, event_id: EventId, winner_count: int) -> Giveaway:
        try:
            with transaction.atomic():
                row = models.Giveaway.objects.create(
                    event_id=event_id.value,
                    winner_count=winner_count,
                )
        except IntegrityError as exc:
            raise DuplicateGiveawayError(str(event_id)) from exc
        return _to_giveaway(row)

    def get_giveaway(
        self, giveaway_id: GiveawayId, for_update: bool = False
    ) -> Giveaway | None:
        qs = models.Giveaway.objects.filter(pk=giveaway_id.value)
        if for_update:
            qs = qs.select_for_update()
        row = qs.first()
        return _to_giveaway(row) if row else None

    def get_giveaway_for_event(self, event_id: EventId) -> Giveaway | None:
        row = models.Giveaway.objects.filter(event_id=event_id.value).first()
        return _to_giveaway(row) if row else None

    def record_result(
        self,
        giveaway_id: GiveawayId,
        winners: tuple[WalletAddress, ...],
        tx_hash: TxHash,
        executed_at: datetime,
    ) -> Giveaway:
        row = models.Giveaway.objects.filter(pk=giveaway_id.value).first()
        if row is None:
            raise GiveawayNotFoundError(str(giveaway_id))
        row.winners = [w.value for w in winners]
        row.tx_hash = tx_hash.value
        row.executed_at = executed_at
        row.save(update_fields=["winners", "tx_hash", "executed_at"])
        return _to_giveaway(row)
