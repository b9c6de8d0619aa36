"""In-memory block collection keyed by lattice cell."""

import itertools
import time
from dataclasses import dataclass

from ..hand_gestures.config import BLOCK_COLORS
from .coord_mapper import WorldPosition
from .grid import cell_key


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


@dataclass(frozen=True)
class Block:
    id: str
    position: WorldPosition
    color: str


class BlockWorld:
    """
    Block collection the interaction arbiter writes to.

    One block per cell; inserting into an occupied cell is ignored and
    removing an empty cell does nothing.
    """

    def __init__(self, colors: tuple[str, ...] = BLOCK_COLORS):
        self._colors = colors
        self._blocks: dict[str, Block] = {}
        self._ids = itertools.count(1)
        self._placed = 0

    def exists(self, key: str) -> bool:
        return key in self._blocks

    def insert(self, position: WorldPosition, metadata: dict | None = None) -> Block | None:
        """Place a block; returns it, or None if the cell was taken."""
        key = cell_key(*position)
        if key in self._blocks:
            return None

        metadata = metadata or {}
        color = metadata.get("color") or self._colors[self._placed % len(self._colors)]
        block = Block(id=f"block_{next(self._ids)}", position=WorldPosition(*position), color=color)
        self._blocks[key] = block
        self._placed += 1
        print(f"[{_timestamp()}] WORLD: Placed {block.id} at {key}")
        return block

    def remove(self, key: str) -> Block | None:
        block = self._blocks.pop(key, None)
        if block is not None:
            print(f"[{_timestamp()}] WORLD: Removed {block.id} at {key}")
        return block

    def clear(self) -> None:
        self._blocks.clear()

    @property
    def blocks(self) -> list[Block]:
        return list(self._blocks.values())

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, key: str) -> bool:
        return self.exists(key)
