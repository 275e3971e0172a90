"""Basic world and spell kinds shared across the engine."""

from dataclasses import dataclass
from enum import Enum

BLOCK_SIZE = 0.5


class SpellType(Enum):
    """Identifies the kind of a spell."""

    LIGHTNING = 0
    WATERBALL = 1


@dataclass
class Block:
    """A single voxel; inactive blocks are empty space."""

    active: bool = False