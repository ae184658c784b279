# sandslab/config.py
"""
Library configuration and defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SlabConfig:
    """Global configuration for settling, rendering and the robot patrol."""

    # Ground plane; the lowest occupiable z is ground_level + 1
    ground_level: int = 0

    # Axis reported for a brick made of a single cube
    single_cube_axis: str = "Z"

    # Labels used by the text projection, one per brick in input order
    label_alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    overflow_label: str = "#"

    # Robot patrol defaults
    robot_space: Tuple[int, int] = (101, 103)  # (width, height) in tiles
    robot_seconds: int = 100

    log_level: str = "INFO"

    def __post_init__(self):
        if self.single_cube_axis not in ("X", "Y", "Z"):
            raise ValueError(
                f"single_cube_axis must be one of X, Y, Z, got {self.single_cube_axis!r}"
            )
        if self.robot_space[0] <= 0 or self.robot_space[1] <= 0:
            raise ValueError(f"robot_space must be positive, got {self.robot_space}")


# Global config instance
CONFIG = SlabConfig()
