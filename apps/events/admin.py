from django.contrib import admin
from django.db import models

from .models import Event
from .models import Registration


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    fields = ["user", "created_at"]
    readonly_fields = ["created_at"]
    autocomplete_fields = ["user"]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user", "event")


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "date", "created_by", "registration_count", "created_at"]
    list_filter = ["date", "created_at"]
    search_fields = ["title", "description", "created_by__email"]
    date_hierarchy = "date"
    ordering = ["date"]
    readonly_fields = ["created_at", "updated_at"]
    autocomplete_fields = ["created_by"]
    inlines = [RegistrationInline]

    def get_queryset(self, request):
        return (
            super()
            .get_queryset(request)
            .select_related("created_by")
            .annotate(registration_total=models.Count("registrations"))
        )

    @admin.display(description="Registrations", ordering="registration_total")
    def registration_count(self, obj):
        return obj.registration_total


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "event", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["user__email", "user__name", "event__title"]
    autocomplete_fields = ["user", "event"]
    readonly_fields = ["created_at", "updated_at"]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user", "event")
