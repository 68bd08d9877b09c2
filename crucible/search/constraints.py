"""
Movement Constraints Module - Run-length limits for the mover.
"""

from dataclasses import dataclass
from typing import Dict, List

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class MovementConstraints:
    """
    How many consecutive moves the mover may make in one direction.

    Attributes:
        max_run: Longest allowed straight segment
        min_run: Straight moves required before turning or stopping
        name: Label used in results and logs
    """
    max_run: int
    min_run: int = 1
    name: str = "custom"

    def __post_init__(self):
        for field_name in ("max_run", "min_run"):
            value = getattr(self, field_name)
            # bool is an int subclass but never a meaningful run length
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(
                    f"{field_name} must be an integer, got {value!r}"
                )
            if value < 1:
                raise InvalidConfiguration(
                    f"{field_name} must be positive, got {value}"
                )
        if self.min_run > self.max_run:
            raise InvalidConfiguration(
                f"min_run ({self.min_run}) exceeds max_run ({self.max_run})"
            )

    @property
    def collapses_runs(self) -> bool:
        """
        True when a finalized run-length dominates every longer one.

        Only holds without a minimum run: once min_run > 1, reaching a
        particular run-length is what unlocks turning, so each bucket must
        be tracked on its own.
        """
        return self.min_run <= 1


# Named presets for the two puzzle variants
PRESETS: Dict[str, MovementConstraints] = {
    "crucible": MovementConstraints(max_run=3, min_run=1, name="crucible"),
    "ultra_crucible": MovementConstraints(max_run=10, min_run=4, name="ultra_crucible"),
}


def get_preset(name: str) -> MovementConstraints:
    """
    Look up a preset by name.

    Raises:
        InvalidConfiguration: If no preset has that name
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise InvalidConfiguration(f"Unknown preset: {name}. Available: {available}")
    return PRESETS[name]


def get_preset_names() -> List[str]:
    """List available preset names."""
    return list(PRESETS.keys())
