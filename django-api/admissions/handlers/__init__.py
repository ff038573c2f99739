from admissions.handlers.views import (
    CheckInView,
    EventDetailView,
    EventListView,
    GiveawayView,
    QRTokenView,
)

__all__ = [
    "CheckInView",
    "EventDetailView",
    "EventListView",
    "GiveawayView",
    "QRTokenView",
]
