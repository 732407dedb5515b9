"""Read-only summary statistics over bins and pickup logs."""

from __future__ import annotations

from decimal import Decimal

from django.db.models import Count, Q, Sum

from schemas import BinStats

from .exceptions import store_errors
from .models import Bin, PickupLog
from .utils import FULL_THRESHOLD


def compute_stats() -> BinStats:
    """Compute the dashboard counters.

    Bin counts come from one query and pickup totals from another, so under
    concurrent writes the two halves may reflect slightly different moments.

    Returns:
        BinStats: Totals; ``total_weight_collected`` is 0 when no pickups exist.

    Raises:
        StoreError: If either query fails.
    """
    with store_errors("fetch statistics"):
        bin_counts = Bin.objects.aggregate(
            total=Count("id"),
            full=Count("id", filter=Q(fill_level__gte=FULL_THRESHOLD)),
            empty=Count("id", filter=Q(fill_level=0)),
        )
        pickup_totals = PickupLog.objects.aggregate(
            count=Count("id"),
            weight=Sum("collected_kg"),
        )

    return BinStats(
        total_bins=bin_counts["total"],
        full_bins=bin_counts["full"],
        empty_bins=bin_counts["empty"],
        total_pickups=pickup_totals["count"],
        total_weight_collected=pickup_totals["weight"] or Decimal("0"),
    )
