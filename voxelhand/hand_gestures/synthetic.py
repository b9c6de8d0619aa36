"""Synthetic hand poses for exercising the gesture and interaction code."""

from .landmarks import LM, HandObservation, Landmark

# Open right hand in palm-length units: wrist below, middle MCP at the origin.
_OPEN_POSE = (
    (0.0, 1.0),                                         # wrist
    (-0.3, 0.8), (-0.45, 0.6), (-0.55, 0.45), (-0.6, 0.3),   # thumb
    (-0.2, 0.0), (-0.22, -0.4), (-0.23, -0.6), (-0.24, -0.8),  # index
    (0.0, 0.0), (0.0, -0.45), (0.0, -0.7), (0.0, -0.9),        # middle
    (0.2, 0.05), (0.21, -0.35), (0.22, -0.55), (0.22, -0.75),  # ring
    (0.38, 0.15), (0.4, -0.15), (0.41, -0.3), (0.42, -0.45),   # pinky
)

# Fingertips folded back toward the wrist
_FIST_TIPS = {
    LM.INDEX_TIP: (-0.1, 0.6),
    LM.MIDDLE_TIP: (0.0, 0.55),
    LM.RING_TIP: (0.1, 0.6),
    LM.PINKY_TIP: (0.2, 0.65),
}


def make_hand(
    cx: float = 0.5,
    cy: float = 0.5,
    scale: float = 0.2,
    pinch: bool = False,
    fist: bool = False,
    handedness: str = "Right",
) -> HandObservation:
    """
    Build a 21-landmark hand.

    Args:
        cx, cy: Image position of the middle MCP
        scale: Wrist -> middle MCP length in normalized units
        pinch: Put the thumb tip on the index tip
        fist: Fold the four fingertips onto the palm
        handedness: "Left" or "Right"
    """
    pose = list(_OPEN_POSE)
    if fist:
        for idx, p in _FIST_TIPS.items():
            pose[idx] = p
    if pinch:
        pose[LM.THUMB_TIP] = pose[LM.INDEX_TIP]

    points = tuple(Landmark(cx + dx * scale, cy + dy * scale, 0.0) for dx, dy in pose)
    return HandObservation(landmarks=points, handedness=handedness)


def scale_about_wrist(hand: HandObservation, k: float) -> HandObservation:
    """Scale every landmark by k around the wrist."""
    w = hand.landmarks[LM.WRIST]
    points = tuple(
        Landmark(w.x + (p.x - w.x) * k, w.y + (p.y - w.y) * k, w.z + (p.z - w.z) * k)
        for p in hand.landmarks
    )
    return HandObservation(landmarks=points, handedness=hand.handedness)


def move_hand(hand: HandObservation, dx: float, dy: float) -> HandObservation:
    """Translate every landmark in image space."""
    points = tuple(Landmark(p.x + dx, p.y + dy, p.z) for p in hand.landmarks)
    return HandObservation(landmarks=points, handedness=hand.handedness)
