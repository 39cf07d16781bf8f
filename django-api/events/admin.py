from django.contrib import admin

from events.models import Booking, Event, Order, Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["email", "full_name", "role", "created_at"]
    list_filter = ["role"]
    search_fields = ["email", "full_name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "location", "event_date", "price", "available_seats", "capacity", "status"]
    list_filter = ["status", "category"]
    search_fields = ["title", "location"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["user", "event_id", "num_tickets", "total_price", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["user__email"]
    readonly_fields = ["created_at"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["user", "event_id", "quantity", "total_amount", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["user__email"]
    readonly_fields = ["created_at"]
