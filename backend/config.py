"""
Simulation configuration.

Values can be supplied directly or read from the environment (a .env file
is honoured once the entry point has called load_dotenv()):

- SNAKE_WIDTH, SNAKE_HEIGHT: grid extent in pixels
- SNAKE_CELL_SIZE: side length of one cell
- SNAKE_UPS: simulation updates per second
- SNAKE_MAX_TICKS: upper bound on ticks for a headless run
- SNAKE_MAX_PLACEMENT_ATTEMPTS: random draws before food placement scans the grid
- SNAKE_SEED: optional seed for reproducible runs
"""

import os
from dataclasses import dataclass
from typing import Optional

from domain.constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_CELL_SIZE,
    DEFAULT_UPS,
    DEFAULT_MAX_TICKS,
    DEFAULT_MAX_PLACEMENT_ATTEMPTS,
)
from domain.grid import validate_grid


def _env_number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    return int(value) if value.is_integer() else value


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class SimulationConfig:
    """Grid extent and driver settings for one simulation."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    cell_size: float = DEFAULT_CELL_SIZE
    updates_per_second: float = DEFAULT_UPS
    max_ticks: int = DEFAULT_MAX_TICKS
    max_placement_attempts: int = DEFAULT_MAX_PLACEMENT_ATTEMPTS
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        return cls(
            width=_env_number("SNAKE_WIDTH", DEFAULT_WIDTH),
            height=_env_number("SNAKE_HEIGHT", DEFAULT_HEIGHT),
            cell_size=_env_number("SNAKE_CELL_SIZE", DEFAULT_CELL_SIZE),
            updates_per_second=_env_number("SNAKE_UPS", DEFAULT_UPS),
            max_ticks=_env_int("SNAKE_MAX_TICKS", DEFAULT_MAX_TICKS),
            max_placement_attempts=_env_int(
                "SNAKE_MAX_PLACEMENT_ATTEMPTS", DEFAULT_MAX_PLACEMENT_ATTEMPTS
            ),
            seed=_env_int("SNAKE_SEED", None),
        )

    @property
    def tick_interval(self) -> float:
        """Seconds between two updates."""
        return 1.0 / self.updates_per_second

    def validate(self) -> None:
        """
        Raises:
            ValueError: If any setting would break wrapping, placement or timing.
        """
        validate_grid(self.width, self.height, self.cell_size)

        if self.updates_per_second <= 0:
            raise ValueError(
                f"updates_per_second must be positive, got {self.updates_per_second}"
            )
        if self.max_ticks < 0:
            raise ValueError(f"max_ticks must not be negative, got {self.max_ticks}")
        if self.max_placement_attempts <= 0:
            raise ValueError(
                f"max_placement_attempts must be positive, got {self.max_placement_attempts}"
            )
