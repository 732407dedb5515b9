from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import pydantic
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from schemas import (
    BinCreatedResponse,
    BinCreateInput,
    BinOut,
    FillLevelInput,
    MessageResponse,
    PickupInput,
    PickupOut,
)

from . import ledger, registry, stats
from .exceptions import StoreError, ValidationError, WasteError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)
View = Callable[..., JsonResponse]


def _message(message: str, status: int = 200) -> JsonResponse:
    return JsonResponse(MessageResponse(message=message).model_dump(), status=status)


def _parse_body(request: HttpRequest, schema: type[SchemaT]) -> SchemaT:
    """Decode a JSON object body into ``schema``.

    Raises:
        ValidationError: If the body is not a JSON object or does not match
            the schema's types.
    """
    try:
        data = json.loads(request.body or b"{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = "Request body must be valid JSON"
        raise ValidationError(msg) from e
    if not isinstance(data, dict):
        msg = "Request body must be a JSON object"
        raise ValidationError(msg)
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        msg = f"Invalid value for {field}: {first['msg']}"
        raise ValidationError(msg) from e


def api_view(failure_message: str) -> Callable[[View], View]:
    """Translate domain errors raised by a view into JSON error responses.

    ``ValidationError`` and ``NotFoundError`` keep their message. A
    ``StoreError`` is answered with ``failure_message`` only; the underlying
    database error was already logged where it was caught.

    Args:
        failure_message: The message sent with a 500 response.
    """
    def decorator(view: View) -> View:
        @wraps(view)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
            try:
                return view(request, *args, **kwargs)
            except StoreError:
                return _message(failure_message, status=500)
            except WasteError as e:
                logger.info("%s %s rejected: %s", request.method, request.path, e)
                return _message(str(e), status=e.status_code)
        return wrapper
    return decorator


def _dispatch(request: HttpRequest, handlers: dict[str, View], *args: Any, **kwargs: Any) -> JsonResponse:
    handler = handlers.get(request.method)
    if handler is None:
        response = _message(f"Method {request.method} not allowed", status=405)
        response["Allow"] = ", ".join(handlers)
        return response
    return handler(request, *args, **kwargs)


@api_view("Failed to fetch bins")
def list_bins_view(request: HttpRequest) -> JsonResponse:
    """Return all bins, newest first, each with its derived status."""
    bins = registry.list_bins()
    return JsonResponse([BinOut.model_validate(b).model_dump(mode="json") for b in bins], safe=False)


@api_view("Failed to add bin")
def create_bin_view(request: HttpRequest) -> JsonResponse:
    """Register a bin from a ``{location, type}`` body."""
    body = _parse_body(request, BinCreateInput)
    new_bin = registry.create_bin(body.location, body.type)
    return JsonResponse(BinCreatedResponse(message="Bin added successfully", id=new_bin.id).model_dump())


@api_view("Failed to update fill level")
def update_fill_level_view(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Set a bin's fill level from a ``{fillLevel}`` body."""
    body = _parse_body(request, FillLevelInput)
    registry.set_fill_level(bin_id, body.fill_level)
    return _message("Fill level updated successfully")


@api_view("Failed to record pickup")
def record_pickup_view(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Log a pickup from a ``{collectedWeight}`` body and empty the bin."""
    body = _parse_body(request, PickupInput)
    ledger.record_pickup(bin_id, body.collected_weight)
    return _message("Pickup recorded and bin reset successfully")


@api_view("Failed to delete bin")
def delete_bin_view(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Delete a bin and its pickup history."""
    registry.delete_bin(bin_id)
    return _message("Bin deleted successfully")


@api_view("Failed to fetch pickup logs")
def list_pickups_view(request: HttpRequest) -> JsonResponse:
    """Return the pickup history joined with bin location and type."""
    pickups = ledger.list_pickups()
    return JsonResponse([PickupOut.from_log(p).model_dump(mode="json") for p in pickups], safe=False)


@api_view("Failed to fetch statistics")
def stats_view(request: HttpRequest) -> JsonResponse:
    """Return the dashboard counters with camelCase keys."""
    return JsonResponse(stats.compute_stats().model_dump(mode="json", by_alias=True))


@csrf_exempt
def bins_collection(request: HttpRequest) -> JsonResponse:
    """Route ``/api/bins`` by HTTP method."""
    return _dispatch(request, {"GET": list_bins_view, "POST": create_bin_view})


@csrf_exempt
def bin_detail(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Route ``/api/bins/<id>`` by HTTP method."""
    return _dispatch(request, {"DELETE": delete_bin_view}, bin_id)


@csrf_exempt
def bin_fill(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Route ``/api/bins/<id>/fill`` by HTTP method."""
    return _dispatch(request, {"PUT": update_fill_level_view}, bin_id)


@csrf_exempt
def bin_pickup(request: HttpRequest, bin_id: int) -> JsonResponse:
    """Route ``/api/bins/<id>/pickup`` by HTTP method."""
    return _dispatch(request, {"POST": record_pickup_view}, bin_id)


@csrf_exempt
def pickups_collection(request: HttpRequest) -> JsonResponse:
    """Route ``/api/pickups`` by HTTP method."""
    return _dispatch(request, {"GET": list_pickups_view})


@csrf_exempt
def stats_collection(request: HttpRequest) -> JsonResponse:
    """Route ``/api/stats`` by HTTP method."""
    return _dispatch(request, {"GET": stats_view})
