"""World-space mapping, grid, navigation and interaction arbitration."""

from .coord_mapper import (
    CameraTransform,
    WorldPosition,
    estimate_depth,
    map_landmark_to_world,
    map_point,
)
from .grid import cell_key, clamp, parse_cell_key, snap, snap_position
from .navigation import NavigationAnchor, NavigationController, NavigationState, hands_angle
from .block_world import Block, BlockWorld
from .interaction import (
    BlockIntent,
    FrameResult,
    InteractionArbiter,
    InteractionMode,
    select_mode,
)

__all__ = [
    "CameraTransform",
    "WorldPosition",
    "estimate_depth",
    "map_landmark_to_world",
    "map_point",
    "cell_key",
    "clamp",
    "parse_cell_key",
    "snap",
    "snap_position",
    "NavigationAnchor",
    "NavigationController",
    "NavigationState",
    "hands_angle",
    "Block",
    "BlockWorld",
    "BlockIntent",
    "FrameResult",
    "InteractionArbiter",
    "InteractionMode",
    "select_mode",
]
