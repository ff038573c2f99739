"""Service construction for the HTTP layer.

Stores are stateless and built per call. The token rotator holds the signing
secret and is built once per process.
"""

from functools import lru_cache

from admissions.conf import TokenSettings
from admissions.services import (
    AdmissionController,
    EventLedger,
    EventService,
    GiveawayCoordinator,
    TokenRotator,
)
from admissions.stores import (
    DjangoCheckInStore,
    DjangoEventStore,
    DjangoGiveawayStore,
    DjangoUnitOfWork,
)


@lru_cache(maxsize=1)
def get_token_settings() -> TokenSettings:
    return TokenSettings.from_settings()


@lru_cache(maxsize=1)
def get_token_rotator() -> TokenRotator:
    return TokenRotator(get_token_settings())


def get_event_ledger() -> EventLedger:
    return EventLedger(DjangoEventStore())


def get_admission_controller() -> AdmissionController:
    return AdmissionController(
        ledger=get_event_ledger(),
        check_ins=DjangoCheckInStore(),
        tokens=get_token_rotator(),
        uow=DjangoUnitOfWork(),
        require_token=get_token_settings().require_token,
    )


def get_giveaway_coordinator() -> GiveawayCoordinator:
    return GiveawayCoordinator(
        ledger=get_event_ledger(),
        giveaways=DjangoGiveawayStore(),
        check_ins=DjangoCheckInStore(),
        uow=DjangoUnitOfWork(),
    )


def get_event_service() -> EventService:
    return EventService(
        events=DjangoEventStore(),
        check_ins=DjangoCheckInStore(),
        giveaways=DjangoGiveawayStore(),
    )


def reset() -> None:
    """Drop cached configuration so the next call re-reads settings."""
    get_token_rotator.cache_clear()
    get_token_settings.cache_clear()
