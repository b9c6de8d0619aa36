"""Hand landmark types and conversion from MediaPipe results."""

from dataclasses import dataclass
from typing import Literal, NamedTuple, Sequence

from .config import INVERT_HANDEDNESS, NUM_LANDMARKS

Handedness = Literal["Left", "Right"]


# MediaPipe landmark indices
class LM:
    WRIST = 0
    THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
    INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
    MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
    RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
    PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20

    FINGER_TIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)


class Landmark(NamedTuple):
    """Single tracked point; x, y normalized to [0, 1] with top-left origin."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class HandObservation:
    """One hand as seen in a single frame."""
    landmarks: tuple[Landmark, ...]
    handedness: Handedness

    @property
    def is_complete(self) -> bool:
        return len(self.landmarks) >= NUM_LANDMARKS


def landmark_at(landmarks: Sequence[Landmark] | None, index: int) -> Landmark | None:
    """Landmark at `index`, or None when the list is absent, short, or has a hole."""
    if not landmarks or index < 0 or index >= len(landmarks):
        return None
    return landmarks[index]


def get_handedness_label(handedness, invert: bool = INVERT_HANDEDNESS) -> str:
    """Extract handedness label, optionally inverting left/right."""
    try:
        lbl = handedness.classification[0].label
    except (AttributeError, IndexError, TypeError):
        return "Unknown"

    if invert:
        return {"Left": "Right", "Right": "Left"}.get(lbl, lbl)
    return lbl


def observations_from_results(results, invert: bool = INVERT_HANDEDNESS) -> list[HandObservation]:
    """
    Convert a MediaPipe Hands result into hand observations.

    Hands whose handedness cannot be read are dropped, since the arbiter
    only dispatches on "Left" and "Right".

    Args:
        results: Object with `multi_hand_landmarks` and `multi_handedness`
        invert: Swap Left/Right labels (camera not mirrored)

    Returns:
        List of 0-2 HandObservation
    """
    hand_lms = getattr(results, "multi_hand_landmarks", None) or []
    handedness = getattr(results, "multi_handedness", None) or []

    observations = []
    for hand, side in zip(hand_lms, handedness):
        label = get_handedness_label(side, invert)
        if label not in ("Left", "Right"):
            continue
        points = tuple(Landmark(lm.x, lm.y, lm.z) for lm in hand.landmark)
        observations.append(HandObservation(landmarks=points, handedness=label))
    return observations
