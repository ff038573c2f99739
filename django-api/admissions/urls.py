from django.urls import path

from admissions.handlers import (
    CheckInView,
    EventDetailView,
    EventListView,
    GiveawayView,
    QRTokenView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path(
        "events/<int:external_event_id>",
        EventDetailView.as_view(),
        name="event-detail",
    ),
    path("checkins", CheckInView.as_view(), name="checkin-list"),
    path("qr-token", QRTokenView.as_view(), name="qr-token"),
    path("giveaways", GiveawayView.as_view(), name="giveaway"),
]
