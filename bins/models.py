from __future__ import annotations

from typing import ClassVar

from django.db import models

from .utils import FILL_LEVEL_MAX, FILL_LEVEL_MIN, classify_fill_level

LOCATION_MAX_LENGTH = 100
TYPE_MAX_LENGTH = 30
COLLECTED_KG_MAX_DIGITS = 8
COLLECTED_KG_DECIMAL_PLACES = 2


class Bin(models.Model):
    """A physical waste receptacle and its current fill level.

    The display status is derived from ``fill_level`` on read and is never
    stored.

    Attributes:
        location (str): Where the bin stands (e.g., "Main St").
        type (str): Waste category (e.g., "general", "recyclable", "organic").
        fill_level (int): How full the bin is, as a percentage in 0..100.
        created_at (DateTimeField): When the bin was registered.
        updated_at (DateTimeField): When the fill level last changed.
    """
    location = models.CharField(max_length=LOCATION_MAX_LENGTH)
    type = models.CharField(max_length=TYPE_MAX_LENGTH)
    fill_level = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Table name and fill level range constraint for Bin."""

        db_table = "waste_bins"
        ordering: ClassVar = ["-id"]
        constraints: ClassVar = [
            models.CheckConstraint(
                condition=models.Q(fill_level__gte=FILL_LEVEL_MIN, fill_level__lte=FILL_LEVEL_MAX),
                name="waste_bin_fill_level_range",
            )
        ]

    def __str__(self) -> str:
        return f"{self.location} ({self.type})"

    @property
    def status(self) -> str:
        """Return the display status for the current fill level."""
        return classify_fill_level(self.fill_level)


class PickupLog(models.Model):
    """A collection event that emptied a bin.

    Rows are only created together with the bin reset in
    ``bins.ledger.record_pickup`` and are removed only when their bin is
    deleted.

    Attributes:
        bin (Bin): The bin that was emptied.
        collected_kg (Decimal): Weight of the collected waste in kilograms.
        pickup_time (DateTimeField): When the pickup was recorded.
    """
    bin = models.ForeignKey(Bin, related_name="pickups", on_delete=models.CASCADE)
    collected_kg = models.DecimalField(
        max_digits=COLLECTED_KG_MAX_DIGITS,
        decimal_places=COLLECTED_KG_DECIMAL_PLACES,
    )
    pickup_time = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Table name and weight constraint for PickupLog."""

        db_table = "pickup_logs"
        ordering: ClassVar = ["-pickup_time", "-id"]
        constraints: ClassVar = [
            models.CheckConstraint(
                condition=models.Q(collected_kg__gte=0),
                name="pickup_log_collected_kg_non_negative",
            )
        ]

    def __str__(self) -> str:
        return f"{self.collected_kg} kg from bin {self.bin_id}"
