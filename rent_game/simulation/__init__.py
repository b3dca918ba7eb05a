"""Simulation clock, rules, player actions and the game controller."""

from rent_game.simulation.actions import ActionHandlers, available_actions, roll_fix_cost
from rent_game.simulation.game import RentGame
from rent_game.simulation.runner import RealtimeRunner
from rent_game.simulation.scheduler import ScheduledTask, Scheduler

__all__ = [
    "ActionHandlers",
    "RealtimeRunner",
    "RentGame",
    "ScheduledTask",
    "Scheduler",
    "available_actions",
    "roll_fix_cost",
]
