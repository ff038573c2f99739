from admissions.stores.django_store import (
    DjangoCheckInStore,
    DjangoEventStore,
    DjangoGiveawayStore,
    DjangoUnitOfWork,
)
from admissions.stores.interfaces import (
    CheckInStore,
    EventStore,
    GiveawayStore,
    UnitOfWork,
)

__all__ = [
    "CheckInStore",
    "EventStore",
    "GiveawayStore",
    "UnitOfWork",
    "DjangoCheckInStore",
    "DjangoEventStore",
    "DjangoGiveawayStore",
    "DjangoUnitOfWork",
]
