"""Enumeration types for the rent-game domain."""

from enum import Enum


class BrokenItem(str, Enum):
    GEYSER = "geyser"
    WINDOW = "window"
    TOILET = "toilet"
    SEPTIC_TANK = "septic-tank"
    GATE = "gate"


class Action(str, Enum):
    FIX = "FIX"
    EVICT = "EVICT"
    LET = "LET"
    BUY = "BUY"
    SELL = "SELL"


class EventType(str, Enum):
    HOUSE_BROKEN = "house.broken"
    RENT_COLLECTED = "rent.collected"
    TENANT_LEFT = "tenant.left"
    MARKET_TURNOVER = "market.turnover"
    HOUSE_FIXED = "house.fixed"
    TENANT_EVICTED = "tenant.evicted"
    HOUSE_LET = "house.let"
    HOUSE_BOUGHT = "house.bought"
    HOUSE_SOLD = "house.sold"
