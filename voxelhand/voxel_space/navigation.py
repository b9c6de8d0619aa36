"""Two-hand scene navigation anchored to the pose at gesture start."""

import math
import time
from dataclasses import dataclass, field, replace

from ..hand_gestures.config import (
    MIN_HAND_DISTANCE,
    ROTATION_SENSITIVITY,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
)
from ..hand_gestures.gestures import distance, get_midpoint
from ..hand_gestures.landmarks import LM, HandObservation, Landmark, landmark_at
from ..hand_gestures.math_utils import clamp


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


@dataclass(frozen=True)
class NavigationState:
    """Camera-control state read by the renderer every frame."""
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    zoom: float = ZOOM_DEFAULT
    is_navigating: bool = False

    def __post_init__(self):
        object.__setattr__(self, "zoom", clamp(self.zoom, ZOOM_MIN, ZOOM_MAX))

    @property
    def rotation(self) -> tuple[float, float]:
        return self.rotation_x, self.rotation_y


@dataclass(frozen=True)
class NavigationAnchor:
    """Reference pose captured on the first frame of a two-hand pinch."""
    midpoint: Landmark
    hand_distance: float
    rotation_x: float
    rotation_y: float
    zoom: float


@dataclass
class NavigationController:
    """
    Incremental two-hand rotate/zoom.

    Idle until the first `update`, which captures an anchor; every later
    `update` is computed from that same anchor, never from the previous
    frame, so small per-frame errors do not accumulate. `reset` returns to
    Idle and keeps the current rotation/zoom as the next baseline.
    """
    state: NavigationState = field(default_factory=NavigationState)
    anchor: NavigationAnchor | None = None
    sensitivity: float = ROTATION_SENSITIVITY

    @property
    def is_anchored(self) -> bool:
        return self.anchor is not None

    def update(self, left: HandObservation, right: HandObservation) -> NavigationState:
        """
        Advance navigation from the current two-hand pose.

        Args:
            left: Left hand (pinching)
            right: Right hand (pinching)

        Returns:
            The new NavigationState (also stored on the controller)
        """
        left_wrist = landmark_at(left.landmarks, LM.WRIST)
        right_wrist = landmark_at(right.landmarks, LM.WRIST)
        if left_wrist is None or right_wrist is None:
            return self.state

        midpoint = get_midpoint(left_wrist, right_wrist)
        hand_distance = distance(left_wrist, right_wrist)

        if self.anchor is None:
            self.anchor = NavigationAnchor(
                midpoint=midpoint,
                hand_distance=hand_distance,
                rotation_x=self.state.rotation_x,
                rotation_y=self.state.rotation_y,
                zoom=self.state.zoom,
            )
            print(f"[{_timestamp()}] NAV: Anchored at ({midpoint.x:.3f}, {midpoint.y:.3f}) "
                  f"dist={hand_distance:.3f} zoom={self.state.zoom:.2f}")

        a = self.anchor
        dx = midpoint.x - a.midpoint.x
        dy = midpoint.y - a.midpoint.y

        # Hands up (dy < 0) pitches up
        zoom = a.zoom * (a.hand_distance / max(MIN_HAND_DISTANCE, hand_distance))
        self.state = NavigationState(
            rotation_x=a.rotation_x - dy * self.sensitivity,
            rotation_y=a.rotation_y + dx * self.sensitivity,
            zoom=zoom,
            is_navigating=True,
        )
        return self.state

    def reset(self) -> None:
        """Drop the anchor; the next update starts a fresh gesture."""
        if self.anchor is not None:
            print(f"[{_timestamp()}] NAV: Released rot=({self.state.rotation_x:+.2f}, "
                  f"{self.state.rotation_y:+.2f}) zoom={self.state.zoom:.2f}")
        self.anchor = None
        self.state = replace(self.state, is_navigating=False)


def hands_angle(left: HandObservation, right: HandObservation) -> float:
    """Angle of the left-wrist -> right-wrist line in image space, radians."""
    lw = landmark_at(left.landmarks, LM.WRIST)
    rw = landmark_at(right.landmarks, LM.WRIST)
    if lw is None or rw is None:
        return 0.0
    return math.atan2(rw.y - lw.y, rw.x - lw.x)
