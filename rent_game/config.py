"""Configuration management for rent-game."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable

from rent_game.exceptions import ConfigurationError


@dataclass
class ClockConfig:
    """Periods of the simulation tasks, in milliseconds."""

    breakage_period_ms: int = 5000
    tenant_damage_period_ms: int = 10000
    rent_period_ms: int = 10000
    turnover_period_ms: int = 15000
    tick_interval_ms: int = 100  # Real-time runner polling interval

    def periods(self) -> dict[str, int]:
        """Map task name to period."""
        return {
            "spontaneous_breakage": self.breakage_period_ms,
            "tenant_damage": self.tenant_damage_period_ms,
            "rent_and_churn": self.rent_period_ms,
            "market_turnover": self.turnover_period_ms,
        }


@dataclass
class EconomyConfig:
    """Starting conditions and economic tunables."""

    starting_money: Decimal = field(default_factory=lambda: Decimal("50000"))
    starting_houses: int = 4
    breakage_probability: float = 0.3


@dataclass
class GameConfig:
    """Main configuration for rent-game."""

    clock: ClockConfig = field(default_factory=ClockConfig)
    economy: EconomyConfig = field(default_factory=EconomyConfig)
    seed: int | None = None
    log_level: str = "INFO"
    locale: str = "en_US"

    def validate(self) -> None:
        """Check the configuration for values the simulation cannot run with.

        Raises
        ------
        ConfigurationError
            If any period is non-positive, starting money or house count is
            negative, or the breakage probability is outside [0, 1].
        """
        for name, period in self.clock.periods().items():
            if period <= 0:
                raise ConfigurationError(f"Period for {name} must be positive, got {period}")
        if self.clock.tick_interval_ms <= 0:
            raise ConfigurationError(
                f"tick_interval_ms must be positive, got {self.clock.tick_interval_ms}"
            )
        if self.economy.starting_money < 0:
            raise ConfigurationError(
                f"starting_money must not be negative, got {self.economy.starting_money}"
            )
        if self.economy.starting_houses < 0:
            raise ConfigurationError(
                f"starting_houses must not be negative, got {self.economy.starting_houses}"
            )
        if not 0.0 <= self.economy.breakage_probability <= 1.0:
            raise ConfigurationError(
                f"breakage_probability must be within [0, 1], got {self.economy.breakage_probability}"
            )

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables.

        Raises
        ------
        ConfigurationError
            If a variable does not parse or the result fails ``validate()``.
        """
        import os

        def parse(name: str, default: str | None, convert: Callable[[str], Any]) -> Any:
            raw = os.getenv(name) or default
            if raw is None:
                return None
            try:
                return convert(raw)
            except (ValueError, ArithmeticError) as exc:
                raise ConfigurationError(f"{name} is not a valid number: {raw!r}") from exc

        config = cls(
            clock=ClockConfig(tick_interval_ms=parse("TICK_INTERVAL_MS", "100", int)),
            economy=EconomyConfig(starting_money=parse("STARTING_MONEY", "50000", Decimal)),
            seed=parse("SEED", None, int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )
        config.validate()
        return config
