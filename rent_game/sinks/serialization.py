"""Conversion of game objects to JSON-ready dicts."""

from decimal import Decimal
from enum import Enum
from typing import Any

from rent_game.models import GameEvent, GameSnapshot, House, Tenant


def event_to_dict(event: GameEvent) -> dict[str, Any]:
    """Flatten an event envelope; ``subject`` is reported as ``house_id``."""
    return {
        "event": event.event_type.value,
        "at_ms": event.at_ms,
        "house_id": event.subject,
        "data": serialize_value(event.data),
    }


def snapshot_to_dict(snapshot: GameSnapshot) -> dict[str, Any]:
    return {
        "at_ms": snapshot.at_ms,
        "money": str(snapshot.money),
        "rating": snapshot.rating,
        "houses": [house_to_dict(h) for h in snapshot.houses],
    }


def house_to_dict(house: House) -> dict[str, Any]:
    """House fields plus the derived ``upset`` flag a renderer needs."""
    return {
        "house_id": house.house_id,
        "address": house.address,
        "value": house.value,
        "owner": house.owner,
        "broken_item": house.broken_item.value if house.broken_item else None,
        "tenant": tenant_to_dict(house.tenant) if house.tenant else None,
        "upset": house.tenant_is_upset,
    }


def tenant_to_dict(tenant: Tenant) -> dict[str, Any]:
    return {"name": tenant.name, "damage": tenant.damage}


def serialize_value(value: Any) -> Any:
    """Serialize a value found in event data.

    Decimals become strings, enums their values, and id sets sorted lists.
    Houses and tenants nested in data are converted as well.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, House):
        return house_to_dict(value)
    if isinstance(value, Tenant):
        return tenant_to_dict(value)
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(serialize_value(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
