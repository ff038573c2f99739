from admissions.domain.models import (
    AdmissionState,
    CheckIn,
    Event,
    EventSummary,
    Giveaway,
    GiveawayStatus,
    RotatingToken,
)
from admissions.domain.value_objects import (
    Capacity,
    CheckInId,
    EventId,
    ExternalEventId,
    GiveawayId,
    TxHash,
    WalletAddress,
    WinnerCount,
)

__all__ = [
    "AdmissionState",
    "CheckIn",
    "Event",
    "EventSummary",
    "Giveaway",
    "GiveawayStatus",
    "RotatingToken",
    "Capacity",
    "CheckInId",
    "EventId",
    "ExternalEventId",
    "GiveawayId",
    "TxHash",
    "WalletAddress",
    "WinnerCount",
]
