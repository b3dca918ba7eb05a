"""House and tenant models."""

from dataclasses import dataclass

from rent_game.models.enums import BrokenItem


@dataclass
class Tenant:
    """Occupant of a house.

    ``damage`` (0-3) is the tenant's propensity to break things; it is fixed
    for the whole tenancy.
    """

    damage: int
    name: str = ""


@dataclass
class House:
    """Rentable property on the market or in the player's portfolio."""

    house_id: int
    value: int  # Purchase and sale price, never changes
    owner: bool = False
    broken_item: BrokenItem | None = None
    tenant: Tenant | None = None
    address: str = ""

    @property
    def is_broken(self) -> bool:
        return self.broken_item is not None

    @property
    def is_vacant(self) -> bool:
        return self.tenant is None

    @property
    def tenant_is_upset(self) -> bool:
        """A tenant living with a broken item is upset and leaves at rent time."""
        return self.tenant is not None and self.broken_item is not None
