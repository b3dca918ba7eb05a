"""House and tenant generator."""

import logging
from typing import Iterable, Iterator

from rent_game.exceptions import IdSpaceExhaustedError
from rent_game.generators.base import BaseGenerator
from rent_game.models import House, Tenant
from rent_game.rng import rand_int

logger = logging.getLogger(__name__)


class HouseGenerator(BaseGenerator):
    """Generate market houses and tenants.

    - House ids are drawn from 100-999 and never repeat an id already in use
    - Values are drawn from 10000-19999
    - Two houses in three come with a tenant
    - Tenant damage is uniform over 0-3
    """

    ID_MIN = 100
    ID_SPAN = 900
    VALUE_MIN = 10000
    VALUE_SPAN = 10000
    TENANCY_ODDS = 3  # Vacant only when a draw from {0, 1, 2} is 0
    DAMAGE_LEVELS = 4

    def create_house(self, taken_ids: Iterable[int] = ()) -> House:
        """Generate a single house for the market.

        Parameters
        ----------
        taken_ids : Iterable[int]
            Ids already in the collection; the new house avoids them.

        Returns
        -------
        House
            Generated house, not owned by the player.

        Raises
        ------
        IdSpaceExhaustedError
            If every id in the range is taken.
        """
        house_id = self._draw_id(set(taken_ids))
        value = rand_int(self.rng, self.VALUE_SPAN) + self.VALUE_MIN
        tenant = self.create_tenant() if rand_int(self.rng, self.TENANCY_ODDS) else None

        return House(
            house_id=house_id,
            value=value,
            owner=False,
            broken_item=None,
            tenant=tenant,
            address=self.fake.street_address(),
        )

    def create_tenant(self) -> Tenant:
        """Generate a tenant with a random damage propensity."""
        return Tenant(
            damage=rand_int(self.rng, self.DAMAGE_LEVELS),
            name=self.fake.name(),
        )

    def generate_batch(self, count: int, taken_ids: Iterable[int] = ()) -> Iterator[House]:
        """Generate ``count`` houses with mutually distinct ids."""
        taken = set(taken_ids)
        for _ in range(count):
            house = self.create_house(taken)
            taken.add(house.house_id)
            yield house

    def _draw_id(self, taken: set[int]) -> int:
        in_range = {i for i in taken if self.ID_MIN <= i < self.ID_MIN + self.ID_SPAN}
        if len(in_range) >= self.ID_SPAN:
            raise IdSpaceExhaustedError(
                f"All {self.ID_SPAN} house ids are in use"
            )

        while True:
            house_id = rand_int(self.rng, self.ID_SPAN) + self.ID_MIN
            if house_id not in taken:
                return house_id
            logger.debug("House id %d already in use, redrawing", house_id)
