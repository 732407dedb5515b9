"""Pickup ledger: the atomic record-and-reset operation and the pickup history."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.db import transaction
from django.utils import timezone

from .exceptions import NotFoundError, ValidationError, store_errors
from .models import COLLECTED_KG_DECIMAL_PLACES, COLLECTED_KG_MAX_DIGITS, Bin, PickupLog

logger = logging.getLogger(__name__)

MAX_COLLECTED_KG = Decimal(10) ** (COLLECTED_KG_MAX_DIGITS - COLLECTED_KG_DECIMAL_PLACES)
COLLECTED_KG_STEP = Decimal(1).scaleb(-COLLECTED_KG_DECIMAL_PLACES)


def validate_collected_kg(collected_kg: object) -> Decimal:
    """Convert a pickup weight to a ``Decimal`` that fits the ledger column.

    Args:
        collected_kg: An int, float, Decimal or numeric string.

    Returns:
        Decimal: The weight rounded half-up to the column's two decimal places.

    Raises:
        ValidationError: If the weight is missing, not a finite number,
            negative or too large for the column once rounded.
    """
    if collected_kg is None or isinstance(collected_kg, bool):
        msg = "Weight is required"
        raise ValidationError(msg)
    try:
        weight = Decimal(str(collected_kg).strip()) if isinstance(collected_kg, (float, str)) else Decimal(collected_kg)
    except (InvalidOperation, TypeError, ValueError):
        msg = "Weight must be a number"
        raise ValidationError(msg) from None
    if not weight.is_finite():
        msg = "Weight must be a number"
        raise ValidationError(msg)
    if weight < 0:
        msg = "Weight must be a positive number"
        raise ValidationError(msg)
    if weight < MAX_COLLECTED_KG:
        weight = weight.quantize(COLLECTED_KG_STEP, rounding=ROUND_HALF_UP)
    if weight >= MAX_COLLECTED_KG:
        msg = f"Weight must be less than {MAX_COLLECTED_KG} kg"
        raise ValidationError(msg)
    return weight


def record_pickup(bin_id: int, collected_kg: object) -> PickupLog:
    """Log a pickup and empty the bin as one unit of work.

    The weight is validated before a transaction is opened. Inside the
    transaction the bin's row is reset to 0 first, which locks it until commit
    and tells us whether the bin exists; the log row is inserted second. Any
    exception raised inside the atomic block (the missing bin included) rolls
    back both writes before it reaches the caller.

    Retrying after an ambiguous failure may record the same pickup twice;
    nothing here deduplicates.

    Args:
        bin_id: The bin that was emptied.
        collected_kg: Collected weight in kilograms, at least 0.

    Returns:
        PickupLog: The committed log entry.

    Raises:
        ValidationError: If the weight is invalid. No transaction is opened.
        NotFoundError: If no bin has ``bin_id``. Nothing is written.
        StoreError: If either write or the commit fails. Nothing is written.
    """
    weight = validate_collected_kg(collected_kg)

    with store_errors("record pickup"), transaction.atomic():
        reset = Bin.objects.filter(pk=bin_id).update(fill_level=0, updated_at=timezone.now())
        if reset == 0:
            raise NotFoundError(bin_id)
        pickup = PickupLog.objects.create(bin_id=bin_id, collected_kg=weight)

    logger.info("Recorded pickup %s of %s kg from bin %s; bin reset to 0%%", pickup.id, weight, bin_id)
    return pickup


def list_pickups() -> list[PickupLog]:
    """Return every pickup log with its bin, most recent pickup first."""
    with store_errors("fetch pickup logs"):
        return list(PickupLog.objects.select_related("bin").order_by("-pickup_time", "-id"))
