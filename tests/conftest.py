"""Shared pytest fixtures for the bin registry, pickup ledger and API tests."""

from decimal import Decimal

import pytest

from bins.models import Bin, PickupLog


@pytest.fixture
def empty_bin(db):
    """Create a freshly registered bin at 0%."""
    return Bin.objects.create(location="Main St", type="general")


@pytest.fixture
def full_bin(db):
    """Create a bin that is 80% full."""
    return Bin.objects.create(location="Harbour Rd", type="recyclable", fill_level=80)


@pytest.fixture
def half_full_bin(db):
    """Create a bin sitting in the Medium band."""
    return Bin.objects.create(location="Park Ave", type="organic", fill_level=50)


@pytest.fixture
def pickup(full_bin):
    """Create a pickup log against the full bin without touching its fill level."""
    return PickupLog.objects.create(bin=full_bin, collected_kg=Decimal("7.25"))
