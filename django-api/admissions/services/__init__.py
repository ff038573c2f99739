from admissions.services.admission_controller import AdmissionController
from admissions.services.event_ledger import EventLedger
from admissions.services.event_service import EventService
from admissions.services.giveaway_coordinator import GiveawayCoordinator
from admissions.services.token_rotator import TokenRotator

__all__ = [
    "AdmissionController",
    "EventLedger",
    "EventService",
    "GiveawayCoordinator",
    "TokenRotator",
]
