"""Landmark-to-world coordinate mapping and depth estimation."""

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import NDArray

from ..hand_gestures.config import (
    CAMERA_ASPECT,
    CAMERA_FAR,
    CAMERA_FOV_DEG,
    CAMERA_NEAR,
    CAMERA_Z,
    DEPTH_FAR,
    DEPTH_MAX_HAND_SIZE,
    DEPTH_MIN_HAND_SIZE,
    DEPTH_NEAR,
    NUM_LANDMARKS,
    RAY_PARALLEL_EPS,
    UNPROJECT_DEPTH,
)
from ..hand_gestures.landmarks import Landmark
from ..hand_gestures.math_utils import bounding_box2, clamp


class WorldPosition(NamedTuple):
    x: float
    y: float
    z: float


def _look_at(eye: NDArray, target: NDArray, up: NDArray) -> NDArray:
    """Camera-to-world matrix for a camera at `eye` looking at `target`."""
    z_axis = eye - target
    z_axis = z_axis / np.linalg.norm(z_axis)
    x_axis = np.cross(up, z_axis)
    x_axis = x_axis / np.linalg.norm(x_axis)
    y_axis = np.cross(z_axis, x_axis)

    m = np.eye(4)
    m[:3, 0] = x_axis
    m[:3, 1] = y_axis
    m[:3, 2] = z_axis
    m[:3, 3] = eye
    return m


def _perspective(fov_deg: float, aspect: float, near: float, far: float) -> NDArray:
    """OpenGL-style perspective projection matrix."""
    f = 1.0 / math.tan(math.radians(fov_deg) / 2)
    return np.array([
        [f / aspect, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) / (near - far), 2 * far * near / (near - far)],
        [0.0, 0.0, -1.0, 0.0],
    ])


@dataclass
class CameraTransform:
    """
    Renderer camera as seen by the mapper.

    Attributes:
        position: Eye position in world space, shape (3,)
        projection: 4x4 projection matrix
        world: 4x4 camera-to-world matrix
    """
    position: NDArray[np.float64]
    projection: NDArray[np.float64]
    world: NDArray[np.float64]
    fov_deg: float | None = None
    aspect: float | None = None

    @classmethod
    def perspective(
        cls,
        fov_deg: float = CAMERA_FOV_DEG,
        aspect: float = CAMERA_ASPECT,
        position: Sequence[float] = (0.0, 0.0, CAMERA_Z),
        target: Sequence[float] = (0.0, 0.0, 0.0),
        up: Sequence[float] = (0.0, 1.0, 0.0),
        near: float = CAMERA_NEAR,
        far: float = CAMERA_FAR,
    ) -> "CameraTransform":
        eye = np.asarray(position, dtype=float)
        return cls(
            position=eye,
            projection=_perspective(fov_deg, aspect, near, far),
            world=_look_at(eye, np.asarray(target, dtype=float), np.asarray(up, dtype=float)),
            fov_deg=fov_deg,
            aspect=aspect,
        )

    @classmethod
    def default(cls) -> "CameraTransform":
        """The camera the closed-form fallback assumes."""
        return cls.perspective()

    def unproject(self, ndc_x: float, ndc_y: float, ndc_z: float) -> NDArray[np.float64]:
        """NDC point -> world point."""
        clip = np.array([ndc_x, ndc_y, ndc_z, 1.0])
        view = np.linalg.inv(self.projection) @ clip
        view = view / view[3]
        return (self.world @ view)[:3]

    def matches_fallback(self, tol: float = 1e-6) -> bool:
        """
        True when this camera agrees with the fallback pinhole assumptions.

        A mismatch does not break mapping with this camera; it means cursors
        mapped without a camera will sit off from what the renderer shows.
        """
        expected = CameraTransform.default()
        if not np.allclose(self.position, expected.position, atol=tol):
            return False
        if not np.allclose(self.world[:3, :3], expected.world[:3, :3], atol=tol):
            return False
        # x/y scale of the projection encode fov and aspect
        return bool(
            np.isclose(self.projection[0, 0], expected.projection[0, 0], atol=tol)
            and np.isclose(self.projection[1, 1], expected.projection[1, 1], atol=tol)
        )


# =============================================================================
# GEOMETRY MAPPER
# =============================================================================

def to_ndc(normalized_x: float, normalized_y: float) -> tuple[float, float]:
    """Image space (top-left origin, Y down) -> NDC (center origin, Y up)."""
    return normalized_x * 2 - 1, -(normalized_y * 2 - 1)


def map_point(
    normalized_x: float,
    normalized_y: float,
    target_depth: float,
    camera: CameraTransform | None = None,
) -> WorldPosition:
    """
    Map a normalized image point onto the world plane z = target_depth.

    No mirroring is applied; pass `1 - x` for a selfie view.

    Args:
        normalized_x, normalized_y: Point in [0, 1] image space
        target_depth: World z of the plane to hit
        camera: Renderer camera; closed-form pinhole fallback when None

    Returns:
        WorldPosition whose z is exactly target_depth
    """
    ndc_x, ndc_y = to_ndc(normalized_x, normalized_y)

    if camera is not None:
        point = camera.unproject(ndc_x, ndc_y, UNPROJECT_DEPTH)
        direction = point - camera.position
        direction = direction / np.linalg.norm(direction)

        if abs(direction[2]) < RAY_PARALLEL_EPS:
            return WorldPosition(0.0, 0.0, target_depth)

        t = (target_depth - camera.position[2]) / direction[2]
        hit = camera.position + direction * t
        return WorldPosition(float(hit[0]), float(hit[1]), target_depth)

    distance = abs(CAMERA_Z - target_depth)
    plane_height = 2 * math.tan(math.radians(CAMERA_FOV_DEG) / 2) * distance
    plane_width = plane_height * CAMERA_ASPECT

    return WorldPosition(ndc_x * plane_width / 2, ndc_y * plane_height / 2, target_depth)


# =============================================================================
# DEPTH ESTIMATOR
# =============================================================================

def estimate_depth(landmarks: Sequence[Landmark] | None) -> float:
    """
    Estimate world depth from the apparent size of the hand.

    The larger side of the hand's image-space bounding box is clamped to
    [DEPTH_MIN_HAND_SIZE, DEPTH_MAX_HAND_SIZE] and mapped linearly so that
    the biggest (closest) hand lands on DEPTH_NEAR and the smallest on
    DEPTH_FAR. Returns 0.0 for incomplete hands, including ones with a
    missing landmark.
    """
    if not landmarks or len(landmarks) < NUM_LANDMARKS:
        return 0.0
    if any(p is None for p in landmarks):
        return 0.0

    min_x, min_y, max_x, max_y = bounding_box2(landmarks)
    hand_size = max(max_x - min_x, max_y - min_y)

    size = clamp(hand_size, DEPTH_MIN_HAND_SIZE, DEPTH_MAX_HAND_SIZE)
    normalized = (size - DEPTH_MIN_HAND_SIZE) / (DEPTH_MAX_HAND_SIZE - DEPTH_MIN_HAND_SIZE)
    return DEPTH_FAR + normalized * (DEPTH_NEAR - DEPTH_FAR)


def map_landmark_to_world(
    landmark: Landmark,
    all_landmarks: Sequence[Landmark],
    camera: CameraTransform | None = None,
    mirror: bool = False,
) -> WorldPosition:
    """Map one landmark of a hand to the world, using the hand's size for depth."""
    x = 1 - landmark.x if mirror else landmark.x
    return map_point(x, landmark.y, estimate_depth(all_landmarks), camera)
