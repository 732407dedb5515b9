from django.contrib import admin

from .models import Bin, PickupLog


@admin.register(Bin)
class BinAdmin(admin.ModelAdmin):
    list_display = ("id", "location", "type", "fill_level", "status", "updated_at")
    list_filter = ("type",)
    search_fields = ("location",)


@admin.register(PickupLog)
class PickupLogAdmin(admin.ModelAdmin):
    list_display = ("id", "bin", "collected_kg", "pickup_time")
    list_select_related = ("bin",)

    def has_add_permission(self, request):
        # Pickups are only created together with the bin reset.
        return False

    def has_change_permission(self, request, obj=None):
        return False
