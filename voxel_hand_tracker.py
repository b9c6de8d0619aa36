"""
Gesture Block Builder (camera demo).

Combines:
- MediaPipe hand tracking
- Pinch / fist classification and the interaction arbiter
- An in-memory block world, reported through a text overlay
"""

import time

import cv2

from voxelhand.hand_gestures.config import CAMERA_ASPECT, DISPLAY_FLIP, MIRROR_CURSOR
from voxelhand.hand_gestures.landmarks import LM
from voxelhand.hand_gestures.math_utils import lerp
from voxelhand.hand_gestures.tracker import HandTracker
from voxelhand.voxel_space import (
    BlockWorld,
    CameraTransform,
    FrameResult,
    InteractionArbiter,
    InteractionMode,
)
from voxelhand.voxel_space.screen_fit import video_to_screen_coordinates

CURSOR_SMOOTHING = 0.35

MODE_COLORS = {
    InteractionMode.BUILD: (80, 200, 80),
    InteractionMode.ERASE: (60, 60, 230),
    InteractionMode.NAVIGATE: (230, 180, 60),
}

INSTRUCTIONS = """
==================================================
Gesture Block Builder
==================================================

Right hand           - aim the cursor
Right pinch          - place a block
Right fist + left    - erase mode, left hand aims
  left pinch         - remove the block under the cursor
Both hands pinching  - rotate (move) and zoom (spread)

Controls:
  'c' - Clear all blocks
  'q' or ESC - Quit
"""


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


def _draw_overlay(frame, overlay: list[str]):
    """Draw text overlay on frame."""
    if not overlay:
        return
    x0, y0, line_h = 12, 22, 22
    max_chars = max(len(s) for s in overlay)
    box_w = min(16 + max_chars * 9, frame.shape[1] - 24)
    box_h = 12 + line_h * len(overlay)

    cv2.rectangle(frame, (8, 8), (8 + box_w, 8 + box_h), (0, 0, 0), -1)
    for i, s in enumerate(overlay):
        cv2.putText(frame, s, (x0, y0 + i * line_h),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 2, cv2.LINE_AA)


def _overlay_lines(result: FrameResult, world: BlockWorld) -> list[str]:
    nav = result.navigation
    lines = [
        f"Mode: {result.mode.value}",
        f"Blocks: {len(world)}",
        f"Rotation: ({nav.rotation_x:+.2f}, {nav.rotation_y:+.2f})  Zoom: {nav.zoom:.1f}",
    ]
    if result.cursor_active:
        raw, cell = result.raw_cursor, result.cursor
        lines.append(f"Cursor: ({raw.x:+.2f}, {raw.y:+.2f}, {raw.z:+.2f})")
        lines.append(f"Cell: ({cell.x:g}, {cell.y:g}, {cell.z:g})")
    else:
        lines.append("Cursor: inactive")
    for intent in result.intents:
        lines.append(f"{intent.action.upper()} {intent.key}")
    return lines


def run_block_builder(camera_index: int = 0, use_camera_model: bool = False) -> None:
    """
    Run the camera-driven block builder.

    Args:
        camera_index: Camera device index
        use_camera_model: Map cursors through a full perspective camera
            instead of the closed-form approximation
    """
    print(INSTRUCTIONS)

    cap = cv2.VideoCapture(camera_index)
    if not cap.isOpened():
        print(f"Error: Cannot open camera {camera_index}")
        return

    camera = CameraTransform.perspective(aspect=CAMERA_ASPECT) if use_camera_model else None
    if camera is not None and not camera.matches_fallback():
        print("Warning: camera model differs from the fallback mapper; cursors may drift")

    world = BlockWorld()
    arbiter = InteractionArbiter(world=world, camera=camera, mirror=MIRROR_CURSOR)
    dot: tuple[float, float] | None = None
    last = time.monotonic()

    try:
        with HandTracker() as tracker:
            print(f"[{_timestamp()}] TRACKER: started on camera {camera_index}")
            while True:
                ret, frame = cap.read()
                if not ret:
                    continue

                now = time.monotonic()
                dt, last = now - last, now

                hands = tracker.process(frame)
                result = arbiter.tick(hands, dt)
                tracker.draw_landmarks(frame)

                display_frame = cv2.flip(frame, 1) if DISPLAY_FLIP else frame
                h, w = display_frame.shape[:2]

                cursor_hand = next(
                    (hnd for hnd in hands
                     if hnd.handedness == ("Left" if result.mode is InteractionMode.ERASE else "Right")),
                    None,
                )
                if result.cursor_active and cursor_hand is not None:
                    tip = cursor_hand.landmarks[LM.INDEX_TIP]
                    tx, ty = video_to_screen_coordinates(tip.x, tip.y, (w, h), (w, h), mirror_x=DISPLAY_FLIP)
                    dot = (tx, ty) if dot is None else (
                        lerp(dot[0], tx, CURSOR_SMOOTHING), lerp(dot[1], ty, CURSOR_SMOOTHING)
                    )
                    cv2.circle(display_frame, (int(dot[0]), int(dot[1])), 12, MODE_COLORS[result.mode], -1)
                    cv2.circle(display_frame, (int(dot[0]), int(dot[1])), 14, (0, 0, 0), 2)
                else:
                    dot = None

                _draw_overlay(display_frame, _overlay_lines(result, world))
                cv2.imshow("Gesture Block Builder", display_frame)

                key = cv2.waitKey(1) & 0xFF
                if key in (ord("q"), 27):
                    break
                if key == ord("c"):
                    world.clear()
        print(f"[{_timestamp()}] TRACKER: stopped with {len(world)} blocks in the world")
    finally:
        cap.release()
        cv2.destroyAllWindows()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Gesture Block Builder")
    parser.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    parser.add_argument("--camera-model", action="store_true",
                        help="Map cursors through a perspective camera model")
    args = parser.parse_args()

    run_block_builder(camera_index=args.camera, use_camera_model=args.camera_model)
