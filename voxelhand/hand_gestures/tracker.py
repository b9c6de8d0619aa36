"""MediaPipe hand tracking wrapper."""

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from .config import (
    INVERT_HANDEDNESS,
    MAX_NUM_HANDS,
    MIN_DETECTION_CONFIDENCE,
    MIN_TRACKING_CONFIDENCE,
)
from .landmarks import HandObservation, observations_from_results


class HandTracker:
    """Wrapper for MediaPipe hand tracking that yields HandObservations."""

    def __init__(
        self,
        max_num_hands: int = MAX_NUM_HANDS,
        min_detection_confidence: float = MIN_DETECTION_CONFIDENCE,
        min_tracking_confidence: float = MIN_TRACKING_CONFIDENCE,
        invert_handedness: bool = INVERT_HANDEDNESS,
    ):
        self._mp_hands = mp.solutions.hands
        self._mp_draw = mp.solutions.drawing_utils
        self._hands = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._invert = invert_handedness
        self._last_results = None

    def process(self, frame: NDArray[np.uint8]) -> list[HandObservation]:
        """Detect hands in a BGR frame."""
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        self._last_results = self._hands.process(rgb)
        return observations_from_results(self._last_results, self._invert)

    def draw_landmarks(self, frame: NDArray[np.uint8]) -> None:
        """Draw hand landmarks on frame."""
        if not self._last_results or not self._last_results.multi_hand_landmarks:
            return

        for hand in self._last_results.multi_hand_landmarks:
            self._mp_draw.draw_landmarks(
                frame, hand, self._mp_hands.HAND_CONNECTIONS
            )

    def close(self) -> None:
        """Release resources."""
        self._hands.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
