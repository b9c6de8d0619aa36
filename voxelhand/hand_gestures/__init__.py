"""Hand landmark types and gesture classification."""

from .config import ViewMode, VIEW_MODE, MAX_NUM_HANDS
from .landmarks import (
    LM,
    Landmark,
    HandObservation,
    landmark_at,
    get_handedness_label,
    observations_from_results,
)
from .gestures import (
    PinchState,
    HandGestures,
    distance,
    get_midpoint,
    get_hand_angle,
    get_index_finger_tip,
    get_pinch_state,
    is_fist,
    classify_hand,
)

__all__ = [
    "ViewMode",
    "VIEW_MODE",
    "MAX_NUM_HANDS",
    "LM",
    "Landmark",
    "HandObservation",
    "landmark_at",
    "get_handedness_label",
    "observations_from_results",
    "PinchState",
    "HandGestures",
    "distance",
    "get_midpoint",
    "get_hand_angle",
    "get_index_finger_tip",
    "get_pinch_state",
    "is_fist",
    "classify_hand",
]
