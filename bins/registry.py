"""Bin registry: validated create, fill level update, listing and deletion."""

from __future__ import annotations

import logging

from django.utils import timezone

from .exceptions import NotFoundError, ValidationError, store_errors
from .models import LOCATION_MAX_LENGTH, TYPE_MAX_LENGTH, Bin
from .utils import FILL_LEVEL_MAX, FILL_LEVEL_MIN

logger = logging.getLogger(__name__)


def _clean_label(value: object, *, field: str, max_length: int) -> str:
    """Return the stripped text of a required label or raise ``ValidationError``."""
    if not isinstance(value, str) or not value.strip():
        msg = "Location and type are required"
        raise ValidationError(msg)
    cleaned = value.strip()
    if len(cleaned) > max_length:
        msg = f"{field.capitalize()} must be at most {max_length} characters"
        raise ValidationError(msg)
    return cleaned


def validate_fill_level(fill_level: object) -> int:
    """Check that a fill level is an integer percentage.

    Args:
        fill_level: The candidate value.

    Returns:
        int: The validated fill level.

    Raises:
        ValidationError: If the value is not an int (bools included) or lies
            outside 0..100.
    """
    if isinstance(fill_level, bool) or not isinstance(fill_level, int):
        msg = "Fill level must be an integer"
        raise ValidationError(msg)
    if not FILL_LEVEL_MIN <= fill_level <= FILL_LEVEL_MAX:
        msg = f"Fill level must be between {FILL_LEVEL_MIN} and {FILL_LEVEL_MAX}"
        raise ValidationError(msg)
    return fill_level


def create_bin(location: object, type: object) -> Bin:  # noqa: A002 - mirrors the column name
    """Register a new, empty bin.

    Args:
        location: Where the bin stands. Must be non-empty.
        type: Waste category. Must be non-empty.

    Returns:
        Bin: The saved bin, with its assigned ``id`` and ``fill_level`` 0.

    Raises:
        ValidationError: If either field is missing, blank or too long.
        StoreError: If the insert fails.
    """
    location = _clean_label(location, field="location", max_length=LOCATION_MAX_LENGTH)
    bin_type = _clean_label(type, field="type", max_length=TYPE_MAX_LENGTH)

    with store_errors("add bin"):
        new_bin = Bin.objects.create(location=location, type=bin_type, fill_level=0)

    logger.info("Created bin %s at %r (%s)", new_bin.id, new_bin.location, new_bin.type)
    return new_bin


def set_fill_level(bin_id: int, fill_level: object) -> None:
    """Set the fill level of one bin.

    Raises:
        ValidationError: If ``fill_level`` is not an integer in 0..100.
        NotFoundError: If no bin has ``bin_id``.
        StoreError: If the update fails.
    """
    fill_level = validate_fill_level(fill_level)

    with store_errors("update fill level"):
        updated = Bin.objects.filter(pk=bin_id).update(fill_level=fill_level, updated_at=timezone.now())

    if updated == 0:
        raise NotFoundError(bin_id)
    logger.info("Set fill level of bin %s to %s%%", bin_id, fill_level)


def list_bins() -> list[Bin]:
    """Return every bin, most recently created first."""
    with store_errors("fetch bins"):
        return list(Bin.objects.order_by("-id"))


def delete_bin(bin_id: int) -> None:
    """Delete a bin together with all of its pickup logs.

    Raises:
        NotFoundError: If no bin has ``bin_id``.
        StoreError: If the delete fails.
    """
    with store_errors("delete bin"):
        _, deleted_by_model = Bin.objects.filter(pk=bin_id).delete()

    if not deleted_by_model.get(Bin._meta.label, 0):
        raise NotFoundError(bin_id)
    logger.info(
        "Deleted bin %s and %s pickup log(s)",
        bin_id,
        deleted_by_model.get("bins.PickupLog", 0),
    )
