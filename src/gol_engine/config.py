"""Runtime settings for the Game of Life service.

Defaults match the reference deployment. Every value can be overridden
through a GOL_* environment variable (see .env.example).
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOL_"


@dataclass
class GameSettings:
    """Board bounds, iteration ceilings and store policy.

    Attributes:
        min_board_size: Smallest allowed row/column count
        max_board_size: Largest allowed row/column count
        max_iterations: Upper bound for advancing N generations
        final_state_max_iterations: Upper bound for the convergence ceiling
        default_final_state_iterations: Ceiling used when the caller gives none
        default_rows: Height of a random board when not specified
        default_cols: Width of a random board when not specified
        store_expiry_hours: Time-to-live of a saved board
    """

    min_board_size: int = 3
    max_board_size: int = 1000
    max_iterations: int = 1000
    final_state_max_iterations: int = 100000
    default_final_state_iterations: int = 10000
    default_rows: int = 10
    default_cols: int = 10
    store_expiry_hours: float = 1.0

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if self.min_board_size < 1:
            raise ValueError("min_board_size must be at least 1")
        if self.min_board_size > self.max_board_size:
            raise ValueError(f"min_board_size ({self.min_board_size}) cannot exceed "
                             f"max_board_size ({self.max_board_size})")
        if self.max_iterations < 1 or self.final_state_max_iterations < 1:
            raise ValueError("iteration limits must be at least 1")
        if not (1 <= self.default_final_state_iterations <= self.final_state_max_iterations):
            raise ValueError("default_final_state_iterations must be between 1 and final_state_max_iterations")
        if self.store_expiry_hours <= 0:
            raise ValueError("store_expiry_hours must be positive")

    @property
    def store_expiry_seconds(self) -> float:
        return self.store_expiry_hours * 3600.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameSettings':
        """Build settings from GOL_* environment variables.

        Args:
            environ: Mapping to read (os.environ if None)

        Raises:
            ValueError: If a variable cannot be parsed or bounds are inconsistent
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        for f in fields(cls):
            env_name = ENV_PREFIX + f.name.upper()
            if env_name not in environ:
                continue

            raw = environ[env_name]
            try:
                if f.type in (int, 'int'):
                    overrides[f.name] = int(raw)
                elif f.type in (float, 'float'):
                    overrides[f.name] = float(raw)
                else:
                    overrides[f.name] = raw
            except ValueError as e:
                raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e

        if overrides:
            logger.info(f"Loaded settings overrides from environment: {sorted(overrides)}")

        return cls(**overrides)
