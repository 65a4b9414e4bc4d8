from django.contrib import admin

from events.models import Event, Favorite, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    fields = ["user", "ticket_type", "price", "purchased_at", "is_used"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "location", "starts_at", "capacity"]
    list_filter = ["category"]
    search_fields = ["name", "description", "location"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "ticket_type", "price", "purchased_at", "is_used"]
    list_filter = ["ticket_type", "is_used", "event__category"]


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ["user", "event", "created_at"]
