"""
Test suite for the camera demo loop

Run with: python -m pytest test_voxel_hand_tracker.py -v
"""

import unittest
from unittest.mock import MagicMock, patch

import numpy as np

import voxel_hand_tracker


class TestRunBlockBuilder(unittest.TestCase):

    def setUp(self):
        self.cv2 = MagicMock()
        self.cap = self.cv2.VideoCapture.return_value
        self.cap.isOpened.return_value = True
        self.cap.read.return_value = (True, np.zeros((480, 640, 3), dtype=np.uint8))
        self.cv2.flip.side_effect = lambda frame, code: frame
        self.cv2.waitKey.return_value = ord("q")

        self.tracker_cls = MagicMock()
        self.tracker = self.tracker_cls.return_value.__enter__.return_value
        self.tracker.process.return_value = []

    def _run(self):
        with patch.object(voxel_hand_tracker, "cv2", self.cv2), \
                patch.object(voxel_hand_tracker, "HandTracker", self.tracker_cls), \
                patch("builtins.print") as mock_print:
            voxel_hand_tracker.run_block_builder(camera_index=3)
        return [str(c.args[0]) for c in mock_print.call_args_list if c.args]

    def test_logs_tracker_start_and_stop(self):
        lines = self._run()

        started = [s for s in lines if "TRACKER: started" in s]
        stopped = [s for s in lines if "TRACKER: stopped" in s]
        self.assertEqual(len(started), 1)
        self.assertIn("camera 3", started[0])
        self.assertEqual(len(stopped), 1)
        self.assertLess(lines.index(started[0]), lines.index(stopped[0]))

        self.tracker.process.assert_called_once()
        self.cap.release.assert_called_once()
        self.cv2.destroyAllWindows.assert_called_once()

    def test_unopened_camera_never_starts_tracker(self):
        self.cap.isOpened.return_value = False
        lines = self._run()

        self.assertFalse(any("TRACKER" in s for s in lines))
        self.tracker_cls.assert_not_called()


if __name__ == "__main__":
    unittest.main()
