"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from admissions import container
from admissions.conf import TokenSettings
from admissions.services import (
    AdmissionController,
    EventLedger,
    EventService,
    GiveawayCoordinator,
    TokenRotator,
)
from tests.fakes import (
    Clock,
    FakeCheckInStore,
    FakeEventStore,
    FakeGiveawayStore,
    FakeUnitOfWork,
    InMemoryDatabase,
)

ORGANIZER = "0x" + "0f" * 20


def wallet(n: int) -> str:
    """Deterministic lowercase wallet address."""
    return "0x" + f"{n:040x}"


def tx_hash(n: int) -> str:
    return "0x" + f"{n:064x}"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_container():
    container.reset()
    yield
    container.reset()


@pytest.fixture
def clock() -> Clock:
    # aligned to the start of a 30s bucket
    return Clock(now=1_700_000_010.0)


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(secret="unit-test-secret")


@pytest.fixture
def rotator(token_settings: TokenSettings, clock: Clock) -> TokenRotator:
    return TokenRotator(token_settings, clock=clock)


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def ledger(memory_db: InMemoryDatabase) -> EventLedger:
    return EventLedger(FakeEventStore(memory_db))


@pytest.fixture
def controller(memory_db, ledger, rotator, uow) -> AdmissionController:
    return AdmissionController(ledger, FakeCheckInStore(memory_db), rotator, uow)


@pytest.fixture
def coordinator(memory_db, ledger, uow, db_clock_now) -> GiveawayCoordinator:
    return GiveawayCoordinator(
        ledger,
        FakeGiveawayStore(memory_db),
        FakeCheckInStore(memory_db),
        uow,
        now=db_clock_now,
    )


@pytest.fixture
def db_clock_now(memory_db: InMemoryDatabase):
    return memory_db.tick


@pytest.fixture
def event_service(memory_db: InMemoryDatabase) -> EventService:
    return EventService(
        FakeEventStore(memory_db),
        FakeCheckInStore(memory_db),
        FakeGiveawayStore(memory_db),
    )


@pytest.fixture
def make_event(event_service: EventService):
    """Create an event through the service; external ids auto-increment."""
    counter = iter(range(1, 10_000))

    def _make(max_attendees: int | None = None, external_event_id: int | None = None):
        return event_service.create_event(
            external_event_id=external_event_id or next(counter),
            title="Community meetup",
            organizer=ORGANIZER,
            max_attendees=max_attendees,
        )

    return _make
