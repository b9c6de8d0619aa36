"""Gesture-driven block building: hand landmarks in, world edits out."""

from .hand_gestures import (
    ViewMode,
    Landmark,
    HandObservation,
    PinchState,
    HandGestures,
    classify_hand,
    get_pinch_state,
    is_fist,
)

from .voxel_space import (
    BlockWorld,
    CameraTransform,
    FrameResult,
    InteractionArbiter,
    InteractionMode,
    NavigationController,
    NavigationState,
    WorldPosition,
)

__all__ = [
    # Gestures
    "ViewMode",
    "Landmark",
    "HandObservation",
    "PinchState",
    "HandGestures",
    "classify_hand",
    "get_pinch_state",
    "is_fist",
    # World
    "BlockWorld",
    "CameraTransform",
    "FrameResult",
    "InteractionArbiter",
    "InteractionMode",
    "NavigationController",
    "NavigationState",
    "WorldPosition",
]
