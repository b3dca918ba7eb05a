"""Tests for domain models."""

from rent_game.models import Action, BrokenItem, EventType, House, Tenant


class TestBrokenItem:
    """Tests for BrokenItem."""

    def test_members(self) -> None:
        assert [item.value for item in BrokenItem] == [
            "geyser",
            "window",
            "toilet",
            "septic-tank",
            "gate",
        ]

    def test_string_compatible(self) -> None:
        assert BrokenItem.SEPTIC_TANK == "septic-tank"


class TestHouse:
    """Tests for House."""

    def test_defaults(self) -> None:
        house = House(house_id=100, value=10000)

        assert house.owner is False
        assert house.broken_item is None
        assert house.tenant is None
        assert house.address == ""

    def test_is_broken(self) -> None:
        house = House(house_id=100, value=10000, broken_item=BrokenItem.GATE)

        assert house.is_broken
        assert not House(house_id=101, value=10000).is_broken

    def test_is_vacant(self) -> None:
        assert House(house_id=100, value=10000).is_vacant
        assert not House(house_id=100, value=10000, tenant=Tenant(damage=1)).is_vacant

    def test_tenant_is_upset(self) -> None:
        """Only a tenant living with a broken item is upset."""
        happy = House(house_id=100, value=10000, tenant=Tenant(damage=1))
        upset = House(house_id=101, value=10000, tenant=Tenant(damage=1), broken_item=BrokenItem.TOILET)
        empty_broken = House(house_id=102, value=10000, broken_item=BrokenItem.TOILET)

        assert not happy.tenant_is_upset
        assert upset.tenant_is_upset
        assert not empty_broken.tenant_is_upset


class TestEnums:
    """Tests for Action and EventType."""

    def test_actions(self) -> None:
        assert {a.value for a in Action} == {"FIX", "EVICT", "LET", "BUY", "SELL"}

    def test_event_types_are_dotted(self) -> None:
        assert all("." in e.value for e in EventType)
