"""Custom exception hierarchy for rent-game."""


class RentGameError(Exception):
    """Base exception for all rent-game errors."""


class HouseNotFoundError(RentGameError):
    """Raised when a referenced house is not in the current collection."""


class InvalidHouseStateError(RentGameError):
    """Raised when a house is in an invalid state for the operation."""


class InsufficientFundsError(RentGameError):
    """Raised when the player cannot afford the operation."""


class IdSpaceExhaustedError(RentGameError):
    """Raised when every house id is already in use."""


class ConfigurationError(RentGameError):
    """Raised when configuration is invalid or missing."""


class SchedulerError(RentGameError):
    """Raised when the scheduler is used incorrectly."""
