"""Configuration constants for gesture-driven block building."""

import math
from enum import Enum


class ViewMode(Enum):
    FPV_BEHIND_HANDS = "FPV_BEHIND_HANDS"
    SELFIE_WEBCAM = "SELFIE_WEBCAM"


# =============================================================================
# CAMERA / VIEW SETTINGS
# =============================================================================
VIEW_MODE = ViewMode.SELFIE_WEBCAM
FORCE_MIRROR_INPUT = False
INVERT_HANDEDNESS = False
MAX_NUM_HANDS = 2
MIN_DETECTION_CONFIDENCE = 0.7
MIN_TRACKING_CONFIDENCE = 0.6

# Derived flip settings
DISPLAY_FLIP = VIEW_MODE == ViewMode.SELFIE_WEBCAM
MIRROR_CURSOR = VIEW_MODE == ViewMode.SELFIE_WEBCAM

if FORCE_MIRROR_INPUT:
    DISPLAY_FLIP = not DISPLAY_FLIP
    MIRROR_CURSOR = not MIRROR_CURSOR


# =============================================================================
# LANDMARKS
# =============================================================================
NUM_LANDMARKS = 21


# =============================================================================
# PINCH / FIST DETECTION
# =============================================================================
PINCH_BASE_RATIO = 0.35
PINCH_MISSING_DISTANCE = 1.0
FIST_THRESHOLD = 0.18


# =============================================================================
# DEPTH ESTIMATION (hand bounding box -> world z)
# =============================================================================
DEPTH_MIN_HAND_SIZE = 0.1
DEPTH_MAX_HAND_SIZE = 0.4
DEPTH_NEAR = -5.0
DEPTH_FAR = 5.0


# =============================================================================
# FALLBACK CAMERA (must match the renderer's default camera)
# =============================================================================
CAMERA_FOV_DEG = 50.0
CAMERA_ASPECT = 16 / 9
CAMERA_Z = 15.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
UNPROJECT_DEPTH = 0.5
RAY_PARALLEL_EPS = 1e-9


# =============================================================================
# NAVIGATION (two-hand pinch)
# =============================================================================
ROTATION_SENSITIVITY = math.pi * 2
ZOOM_MIN = 5.0
ZOOM_MAX = 30.0
ZOOM_DEFAULT = 15.0
MIN_HAND_DISTANCE = 0.001


# =============================================================================
# ACTION COOLDOWNS
# =============================================================================
BUILD_COOLDOWN_S = 0.30
ERASE_COOLDOWN_S = 0.15


# =============================================================================
# GRID
# =============================================================================
GRID_CELL_SIZE = 1.0
GROUND_Y = 0.0
CELL_KEY_DELIMITER = ","

BLOCK_COLORS = (
    "#5D9E3E",  # grass
    "#74A95B",
    "#4E8B32",
    "#8B5A2B",  # dirt
    "#5D4037",
    "#795548",  # wood
)
