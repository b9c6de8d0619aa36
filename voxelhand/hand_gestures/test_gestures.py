"""
Tests for per-hand gesture classification.

Run with: python -m pytest voxelhand -v
"""

import math
import unittest

from voxelhand.hand_gestures.gestures import (
    NOT_PINCHING,
    classify_hand,
    distance,
    get_hand_angle,
    get_index_finger_tip,
    get_midpoint,
    get_pinch_state,
    is_fist,
)
from voxelhand.hand_gestures.landmarks import LM, HandObservation, Landmark
from voxelhand.hand_gestures.synthetic import make_hand, scale_about_wrist


class TestDistance(unittest.TestCase):

    def test_planar(self):
        self.assertEqual(distance(Landmark(0, 0), Landmark(3, 4)), 5)

    def test_uses_z(self):
        self.assertEqual(distance(Landmark(0, 0, 0), Landmark(1, 2, 2)), 3)

    def test_same_point(self):
        p = Landmark(5, 5, 5)
        self.assertEqual(distance(p, p), 0)


class TestPinchState(unittest.TestCase):

    def test_coincident_tips_pinch_at_any_scale(self):
        """Thumb tip on index tip is a pinch with zero distance."""
        for scale in (0.05, 0.1, 0.2, 0.4):
            state = get_pinch_state(make_hand(scale=scale, pinch=True).landmarks)
            self.assertTrue(state.is_pinching, scale)
            self.assertEqual(state.distance, 0)

    def test_open_hand_not_pinching(self):
        state = get_pinch_state(make_hand().landmarks)
        self.assertFalse(state.is_pinching)
        self.assertGreater(state.distance, 0)

    def test_threshold_scales_with_palm(self):
        """A fixed 0.05 gap pinches on a near hand but not a far one."""
        def with_gap(scale):
            lms = list(make_hand(scale=scale).landmarks)
            tip = lms[LM.INDEX_TIP]
            lms[LM.THUMB_TIP] = Landmark(tip.x + 0.05, tip.y, tip.z)
            return lms

        self.assertTrue(get_pinch_state(with_gap(0.4)).is_pinching)    # threshold 0.14
        self.assertFalse(get_pinch_state(with_gap(0.1)).is_pinching)   # threshold 0.035

    def test_scale_invariance_about_wrist(self):
        """Scaling the whole hand leaves the pinch decision unchanged."""
        almost = list(make_hand(scale=0.2).landmarks)
        tip = almost[LM.INDEX_TIP]
        almost[LM.THUMB_TIP] = Landmark(tip.x + 0.06, tip.y, 0.0)  # 0.3 of palm
        far = list(make_hand(scale=0.2).landmarks)
        far[LM.THUMB_TIP] = Landmark(tip.x + 0.08, tip.y, 0.0)     # 0.4 of palm

        for lms, expected in ((almost, True), (far, False)):
            base = HandObservation(landmarks=tuple(lms), handedness="Right")
            for k in (0.5, 1.0, 1.7):
                scaled = scale_about_wrist(base, k)
                self.assertEqual(get_pinch_state(scaled.landmarks).is_pinching, expected, k)

    def test_custom_base_ratio(self):
        lms = list(make_hand(scale=0.2).landmarks)
        tip = lms[LM.INDEX_TIP]
        lms[LM.THUMB_TIP] = Landmark(tip.x + 0.06, tip.y, 0.0)
        self.assertTrue(get_pinch_state(lms).is_pinching)
        self.assertFalse(get_pinch_state(lms, base_ratio=0.2).is_pinching)

    def test_missing_landmarks_default(self):
        self.assertEqual(get_pinch_state([]), NOT_PINCHING)
        self.assertEqual(get_pinch_state(None), NOT_PINCHING)
        self.assertEqual(get_pinch_state(make_hand().landmarks[:8]), NOT_PINCHING)
        self.assertFalse(NOT_PINCHING.is_pinching)
        self.assertEqual(NOT_PINCHING.distance, 1)


class TestFist(unittest.TestCase):

    def test_fist_detected(self):
        self.assertTrue(is_fist(make_hand(fist=True).landmarks))

    def test_open_hand_not_fist(self):
        self.assertFalse(is_fist(make_hand().landmarks))

    def test_threshold_is_not_adaptive(self):
        """A large enough fist exceeds the fixed threshold."""
        self.assertFalse(is_fist(make_hand(scale=0.6, fist=True).landmarks))

    def test_missing_landmarks_not_fist(self):
        self.assertFalse(is_fist([]))
        self.assertFalse(is_fist(make_hand(fist=True).landmarks[:17]))


class TestHandAngle(unittest.TestCase):

    def test_pointing_up_is_negative_half_pi(self):
        """Image Y points down, so straight up reads -pi/2."""
        self.assertAlmostEqual(get_hand_angle(make_hand().landmarks), -math.pi / 2)

    def test_pointing_right(self):
        lms = [Landmark(0.5, 0.5)] * 21
        lms[LM.MIDDLE_TIP] = Landmark(0.8, 0.5)
        self.assertAlmostEqual(get_hand_angle(lms), 0.0)

    def test_missing(self):
        self.assertEqual(get_hand_angle([Landmark(0, 0)]), 0.0)


class TestPointsOfInterest(unittest.TestCase):

    def test_midpoint(self):
        mid = get_midpoint(Landmark(0, 0, 0), Landmark(1, 2, 4))
        self.assertEqual(mid, Landmark(0.5, 1.0, 2.0))

    def test_index_tip(self):
        hand = make_hand()
        self.assertEqual(get_index_finger_tip(hand.landmarks), hand.landmarks[LM.INDEX_TIP])

    def test_index_tip_absent(self):
        self.assertIsNone(get_index_finger_tip([]))
        self.assertIsNone(get_index_finger_tip(make_hand().landmarks[:5]))


class TestClassifyHand(unittest.TestCase):

    def test_pinching_right(self):
        g = classify_hand(make_hand(pinch=True))
        self.assertEqual(g.label, "Right")
        self.assertTrue(g.pinching)
        self.assertFalse(g.fist)
        self.assertIsNotNone(g.index_tip)

    def test_fist_left(self):
        g = classify_hand(make_hand(fist=True, handedness="Left"))
        self.assertEqual(g.label, "Left")
        self.assertTrue(g.fist)
        self.assertFalse(g.pinching)


if __name__ == "__main__":
    unittest.main()
