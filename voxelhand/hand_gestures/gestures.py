"""Gesture classification for a single hand: pinch, fist, pointing."""

import math
from dataclasses import dataclass
from typing import Sequence

from .math_utils import dist3
from .landmarks import LM, HandObservation, Landmark, landmark_at
from .config import FIST_THRESHOLD, PINCH_BASE_RATIO, PINCH_MISSING_DISTANCE


@dataclass(frozen=True)
class PinchState:
    """Thumb/index pinch reading for one frame."""
    is_pinching: bool
    distance: float


@dataclass(frozen=True)
class HandGestures:
    """Per-hand classification result for one frame."""
    label: str
    pinch: PinchState
    fist: bool
    index_tip: Landmark | None

    @property
    def pinching(self) -> bool:
        return self.pinch.is_pinching


NOT_PINCHING = PinchState(is_pinching=False, distance=PINCH_MISSING_DISTANCE)


# =============================================================================
# GEOMETRY
# =============================================================================

def distance(p1: Landmark, p2: Landmark) -> float:
    """Euclidean distance in full landmark space (x, y, z)."""
    return dist3(p1, p2)


def get_midpoint(p1: Landmark, p2: Landmark) -> Landmark:
    """Component-wise average of two landmarks."""
    return Landmark((p1.x + p2.x) / 2, (p1.y + p2.y) / 2, (p1.z + p2.z) / 2)


def get_hand_angle(landmarks: Sequence[Landmark]) -> float:
    """
    Angle of the wrist -> middle fingertip direction, in radians.

    Measured in image space where Y points down, so a hand pointing straight
    up reads as -pi/2.
    """
    wrist = landmark_at(landmarks, LM.WRIST)
    middle_tip = landmark_at(landmarks, LM.MIDDLE_TIP)
    if wrist is None or middle_tip is None:
        return 0.0
    return math.atan2(middle_tip.y - wrist.y, middle_tip.x - wrist.x)


def get_index_finger_tip(landmarks: Sequence[Landmark]) -> Landmark | None:
    """Primary cursor point, or None if the hand has no index tip."""
    return landmark_at(landmarks, LM.INDEX_TIP)


# =============================================================================
# PINCH DETECTION
# =============================================================================

def get_pinch_state(landmarks: Sequence[Landmark], base_ratio: float = PINCH_BASE_RATIO) -> PinchState:
    """
    Adaptive pinch detection.

    The threshold is `base_ratio` times the wrist -> middle MCP length, so
    the same physical pinch registers whether the hand is near or far.

    Args:
        landmarks: Hand landmarks (21 expected)
        base_ratio: Allowed thumb/index gap as a fraction of palm length

    Returns:
        PinchState; NOT_PINCHING when any required landmark is missing
    """
    thumb_tip = landmark_at(landmarks, LM.THUMB_TIP)
    index_tip = landmark_at(landmarks, LM.INDEX_TIP)
    wrist = landmark_at(landmarks, LM.WRIST)
    middle_mcp = landmark_at(landmarks, LM.MIDDLE_MCP)

    if thumb_tip is None or index_tip is None or wrist is None or middle_mcp is None:
        return NOT_PINCHING

    hand_scale = distance(wrist, middle_mcp)
    pinch_distance = distance(thumb_tip, index_tip)
    return PinchState(
        is_pinching=pinch_distance < hand_scale * base_ratio,
        distance=pinch_distance,
    )


# =============================================================================
# FIST DETECTION
# =============================================================================

def is_fist(landmarks: Sequence[Landmark], threshold: float = FIST_THRESHOLD) -> bool:
    """
    Check if the four non-thumb fingertips are curled in toward the wrist.

    Uses the average wrist distance against a fixed threshold in normalized
    landmark units. Unlike pinch this is not scaled by hand size: it only
    gates the erase mode.
    """
    wrist = landmark_at(landmarks, LM.WRIST)
    tips = [landmark_at(landmarks, idx) for idx in LM.FINGER_TIPS]
    if wrist is None or any(t is None for t in tips):
        return False

    avg = sum(distance(tip, wrist) for tip in tips) / len(tips)
    return avg < threshold


def classify_hand(hand: HandObservation, base_ratio: float = PINCH_BASE_RATIO) -> HandGestures:
    """Run every per-hand gesture check once for this frame."""
    return HandGestures(
        label=hand.handedness,
        pinch=get_pinch_state(hand.landmarks, base_ratio),
        fist=is_fist(hand.landmarks),
        index_tip=get_index_finger_tip(hand.landmarks),
    )
