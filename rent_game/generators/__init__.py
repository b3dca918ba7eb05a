"""Generators for houses and tenants."""

from rent_game.generators.house import HouseGenerator

__all__ = ["HouseGenerator"]
