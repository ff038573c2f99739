"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

import uuid

import pytest
from django.utils import timezone

from admissions import models
from admissions.domain import Capacity, EventId, ExternalEventId, TxHash, WalletAddress
from admissions.domain.errors import (
    AlreadyCheckedInError,
    DuplicateEventError,
    DuplicateGiveawayError,
)
from admissions.stores import DjangoCheckInStore, DjangoEventStore, DjangoGiveawayStore
from tests.conftest import ORGANIZER, tx_hash, wallet


@pytest.fixture
def event_store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def event(event_store):
    return event_store.create_event(
        ExternalEventId(1),
        "Meetup",
        None,
        WalletAddress.from_string(ORGANIZER),
        Capacity(10),
    )


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_round_trips_domain_event(self, event_store, event):
        fetched = event_store.get_event(event.id)
        assert fetched == event
        assert event_store.get_event_by_external_id(ExternalEventId(1)) == event

    def test_duplicate_external_id(self, event_store, event):
        with pytest.raises(DuplicateEventError):
            event_store.create_event(
                ExternalEventId(1),
                "Again",
                None,
                WalletAddress.from_string(ORGANIZER),
                None,
            )

    def test_lock_reports_transition_once(self, event_store, event):
        assert event_store.lock_event(event.id) is True
        assert event_store.lock_event(event.id) is False
        assert models.Event.objects.get(pk=event.id.value).is_locked is True

    def test_admission_state_missing_event(self, event_store):
        assert event_store.get_admission_state(EventId(uuid.uuid4())).exists is False

    def test_admission_state_count_is_live(self, event_store, event):
        models.CheckIn.objects.create(event_id=event.id.value, wallet_address=wallet(1))
        assert event_store.get_admission_state(event.id).current_count == 1
        models.CheckIn.objects.create(event_id=event.id.value, wallet_address=wallet(2))
        state = event_store.get_admission_state(event.id, for_update=True)
        assert state.current_count == 2


@pytest.mark.django_db
class TestDjangoCheckInStore:
    def test_unique_constraint_rejects_second_insert(self, event):
        store = DjangoCheckInStore()
        store.add_check_in(event.id, WalletAddress.from_string(wallet(1)))

        # no application pre-check here: the constraint alone decides
        with pytest.raises(AlreadyCheckedInError):
            store.add_check_in(event.id, WalletAddress.from_string(wallet(1)))
        assert models.CheckIn.objects.filter(event_id=event.id.value).count() == 1

    def test_wallet_stored_lowercase(self, event):
        store = DjangoCheckInStore()
        store.add_check_in(event.id, WalletAddress("0x" + "AB" * 20))
        assert models.CheckIn.objects.get().wallet_address == "0x" + "ab" * 20
        assert store.count_for_wallet(WalletAddress("0x" + "Ab" * 20)) == 1


@pytest.mark.django_db
class TestDjangoGiveawayStore:
    def test_one_giveaway_per_event(self, event):
        store = DjangoGiveawayStore()
        store.create_giveaway(event.id, 1)
        with pytest.raises(DuplicateGiveawayError):
            store.create_giveaway(event.id, 1)
        assert models.Giveaway.objects.count() == 1

    def test_record_result(self, event):
        store = DjangoGiveawayStore()
        pending = store.create_giveaway(event.id, 1)
        executed_at = timezone.now()
        winners = (WalletAddress(wallet(3)),)
        store.record_result(pending.id, winners, TxHash(tx_hash(1)), executed_at)

        stored = store.get_giveaway_for_event(event.id)
        assert [w.value for w in stored.winners] == [wallet(3)]
        assert stored.tx_hash.value == tx_hash(1)
        assert stored.executed_at == executed_at
