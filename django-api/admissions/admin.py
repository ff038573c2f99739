from django.contrib import admin

from admissions.models import CheckIn, Event, Giveaway


class CheckInInline(admin.TabularInline):
    model = CheckIn
    extra = 0
    readonly_fields = ["wallet_address", "checked_in_at"]
    can_delete = False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        "external_event_id",
        "title",
        "organizer",
        "max_attendees",
        "is_locked",
        "created_at",
    ]
    list_filter = ["is_locked"]
    search_fields = ["title", "organizer", "external_event_id"]
    # locking goes through the giveaway flow only
    readonly_fields = ["is_locked"]
    inlines = [CheckInInline]


@admin.register(CheckIn)
class CheckInAdmin(admin.ModelAdmin):
    list_display = ["wallet_address", "event", "checked_in_at"]
    list_filter = ["event"]
    search_fields = ["wallet_address"]
    readonly_fields = ["event", "wallet_address", "checked_in_at"]

    def has_add_permission(self, request) -> bool:
        return False


@admin.register(Giveaway)
class GiveawayAdmin(admin.ModelAdmin):
    list_display = ["event", "winner_count", "tx_hash", "executed_at", "created_at"]
    list_filter = ["event"]
    readonly_fields = ["event", "winner_count", "winners", "tx_hash", "executed_at"]

    def has_add_permission(self, request) -> bool:
        return False
