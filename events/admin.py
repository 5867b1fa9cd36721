from django.contrib import admin

from events.models import Booking, Event


class ReadOnlyAdmin(admin.ModelAdmin):
    """Records are created through the API only, and never edited."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ["email", "created_at"]
    readonly_fields = ["email", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(ReadOnlyAdmin):
    list_display = ["title", "slug", "date", "mode", "created_at"]
    list_filter = ["mode"]
    search_fields = ["title", "location"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(ReadOnlyAdmin):
    list_display = ["email", "event", "created_at"]
    list_filter = ["event"]
    search_fields = ["email"]
