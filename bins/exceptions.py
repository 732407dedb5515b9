"""Error taxonomy shared by the registry, ledger and statistics modules."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError

logger = logging.getLogger(__name__)


class WasteError(Exception):
    """Base class for errors surfaced to API callers.

    Attributes:
        status_code: The HTTP status the error maps to.
    """

    status_code: int = 500


class ValidationError(WasteError):
    """A caller supplied a value outside the accepted contract."""

    status_code = 400


class NotFoundError(WasteError):
    """The referenced bin does not exist."""

    status_code = 404

    def __init__(self, bin_id: object) -> None:
        self.bin_id = bin_id
        super().__init__("Bin not found")


class StoreError(WasteError):
    """The database failed (connectivity, timeout, constraint violation)."""

    status_code = 500


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures inside the block as ``StoreError``.

    The original exception is logged with its traceback and chained, but its
    text is not copied into the ``StoreError`` message.

    Args:
        operation: Short description used in the log line and error message.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Database error while trying to %s", operation)
        msg = f"Failed to {operation}"
        raise StoreError(msg) from exc
