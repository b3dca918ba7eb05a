"""Automated player for headless runs."""

import logging
from decimal import Decimal

from rent_game.models import Action
from rent_game.simulation import RentGame

logger = logging.getLogger(__name__)


class GreedyLandlord:
    """Simple strategy that keeps tenants happy and grows the portfolio.

    On each turn it:
    - repairs every broken house it owns, if the quote is affordable
    - lets every owned house that is vacant and in working order
    - buys the cheapest house on the market if the purchase leaves at
      least ``reserve`` in the wallet

    It only uses actions the game currently offers.
    """

    def __init__(self, reserve: Decimal | int = 5000) -> None:
        self.reserve = Decimal(reserve)

    def play(self, game: RentGame) -> list[tuple[Action, int]]:
        """Take one turn.

        Returns
        -------
        list[tuple[Action, int]]
            Actions that were applied, with their house ids.
        """
        performed: list[tuple[Action, int]] = []

        for house in game.houses:
            if not house.owner:
                continue

            if Action.FIX in game.available_actions(house.house_id):
                if game.fix(house.house_id):
                    performed.append((Action.FIX, house.house_id))

            current = game.available_actions(house.house_id)
            if Action.LET in current and Action.FIX not in current:
                if game.let(house.house_id):
                    performed.append((Action.LET, house.house_id))

        market = sorted((h for h in game.houses if not h.owner), key=lambda h: h.value)
        if market:
            cheapest = market[0]
            if game.money - cheapest.value >= self.reserve and game.buy(cheapest.house_id):
                performed.append((Action.BUY, cheapest.house_id))

        if performed:
            logger.debug("Autoplay took %d actions", len(performed))
        return performed
