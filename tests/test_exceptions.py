"""Tests for custom exception hierarchy."""

from rent_game.exceptions import (
    ConfigurationError,
    HouseNotFoundError,
    IdSpaceExhaustedError,
    InsufficientFundsError,
    InvalidHouseStateError,
    RentGameError,
    SchedulerError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_rent_game_error_is_exception(self) -> None:
        assert isinstance(RentGameError("test"), Exception)

    def test_house_not_found_is_rent_game_error(self) -> None:
        assert isinstance(HouseNotFoundError("test"), RentGameError)

    def test_invalid_house_state_is_rent_game_error(self) -> None:
        assert isinstance(InvalidHouseStateError("test"), RentGameError)

    def test_insufficient_funds_is_rent_game_error(self) -> None:
        assert isinstance(InsufficientFundsError("test"), RentGameError)

    def test_id_space_exhausted_is_rent_game_error(self) -> None:
        assert isinstance(IdSpaceExhaustedError("test"), RentGameError)

    def test_configuration_error_is_rent_game_error(self) -> None:
        assert isinstance(ConfigurationError("test"), RentGameError)

    def test_scheduler_error_is_rent_game_error(self) -> None:
        assert isinstance(SchedulerError("test"), RentGameError)

    def test_exception_message(self) -> None:
        err = HouseNotFoundError("House 123 not found")
        assert str(err) == "House 123 not found"
