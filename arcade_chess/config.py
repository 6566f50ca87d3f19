"""
Engine configuration for the computer opponent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Difficulty(Enum):
    """Difficulty levels; the value is the search depth in plies."""

    EASY = 1
    NORMAL = 2
    HARD = 3

    @classmethod
    def parse(cls, value: Union["Difficulty", str, int]) -> "Difficulty":
        """
        Accept a Difficulty, its name ("hard", case-insensitive) or its depth (3).

        Raises:
            ValueError: For anything else
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown difficulty {value!r}, expected one of "
                    f"{', '.join(d.name.lower() for d in cls)}"
                ) from None
        return cls(value)


@dataclass
class EngineConfig:
    """Configuration for the search-based opponent.

    Difficulty selects the search depth; everything else tunes how the
    search picks among its candidates.
    """

    difficulty: Difficulty = Difficulty.NORMAL
    """Difficulty level (EASY=1, NORMAL=2, HARD=3 plies)"""

    depth: Optional[int] = None
    """Explicit search depth, overrides difficulty when set"""

    random_tiebreak: bool = False
    """Pick uniformly among equally scored root moves instead of the first"""

    random_seed: Optional[int] = None
    """Seed for tie-breaking (None for nondeterministic)"""

    prefer_faster_mates: bool = False
    """Score mates found closer to the root higher (baseline scores all mates alike)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.difficulty = Difficulty.parse(self.difficulty)

        if self.depth is not None and self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

    @property
    def search_depth(self) -> int:
        return self.depth if self.depth is not None else self.difficulty.value

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(difficulty={self.difficulty.name.lower()}, "
            f"depth={self.search_depth}, random_tiebreak={self.random_tiebreak}, "
            f"prefer_faster_mates={self.prefer_faster_mates})"
        )
