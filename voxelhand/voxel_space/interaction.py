"""
Per-frame interaction arbiter.

Reads the hands seen this frame, picks exactly one interaction mode by
priority (NAVIGATE > ERASE > BUILD) and turns it into a cursor position,
block add/remove intents, or a navigation update.
"""

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Sequence

from ..hand_gestures.config import (
    BUILD_COOLDOWN_S,
    ERASE_COOLDOWN_S,
    GRID_CELL_SIZE,
    GROUND_Y,
    MIRROR_CURSOR,
)
from ..hand_gestures.gestures import HandGestures, classify_hand
from ..hand_gestures.landmarks import HandObservation
from .coord_mapper import CameraTransform, WorldPosition, estimate_depth, map_point
from .grid import cell_key, snap
from .navigation import NavigationController, NavigationState


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


class InteractionMode(Enum):
    BUILD = "BUILD"
    NAVIGATE = "NAVIGATE"
    ERASE = "ERASE"


@dataclass(frozen=True)
class BlockIntent:
    action: Literal["add", "remove"]
    position: WorldPosition
    key: str


@dataclass
class FrameResult:
    """Everything the renderer and overlays need from one tick."""
    mode: InteractionMode
    navigation: NavigationState
    cursor_active: bool = False
    raw_cursor: WorldPosition | None = None
    cursor: WorldPosition | None = None
    intents: list[BlockIntent] = field(default_factory=list)


@dataclass
class ArbiterState:
    """Mutable state carried between ticks."""
    clock: float = 0.0
    last_build: float = -math.inf
    last_erase: float = -math.inf
    navigating: bool = False
    mode: InteractionMode = InteractionMode.BUILD


def select_mode(left: HandGestures | None, right: HandGestures | None) -> InteractionMode | None:
    """
    Priority dispatch over this frame's per-hand gestures.

    Returns None when no rule applies (no hands, or a left hand alone).
    """
    if left is not None and right is not None:
        if left.pinching and right.pinching:
            return InteractionMode.NAVIGATE
        if right.fist:
            return InteractionMode.ERASE
    if right is not None:
        return InteractionMode.BUILD
    return None


def _find_hand(hands: Sequence[HandObservation], label: str) -> HandObservation | None:
    return next((h for h in hands if h.handedness == label), None)


class InteractionArbiter:
    """
    Runs once per rendered frame via `tick`.

    Owns the build/erase cooldown clocks and drives the navigation
    controller it is given; the controller is reset exactly once each time
    two-hand navigation ends. `world` is any block store exposing
    `exists(key)`, `insert(position, metadata)` and `remove(key)`.
    """

    def __init__(
        self,
        navigation: NavigationController | None = None,
        world=None,
        camera: CameraTransform | None = None,
        mirror: bool = MIRROR_CURSOR,
        cell_size: float = GRID_CELL_SIZE,
        build_cooldown_s: float = BUILD_COOLDOWN_S,
        erase_cooldown_s: float = ERASE_COOLDOWN_S,
    ):
        self.navigation = navigation if navigation is not None else NavigationController()
        self.world = world
        self.camera = camera
        self.mirror = mirror
        self.cell_size = cell_size
        self.build_cooldown_s = build_cooldown_s
        self.erase_cooldown_s = erase_cooldown_s
        self._state = ArbiterState()

    @property
    def mode(self) -> InteractionMode:
        return self._state.mode

    @property
    def clock(self) -> float:
        return self._state.clock

    def _set_mode(self, mode: InteractionMode) -> None:
        if mode is not self._state.mode:
            print(f"[{_timestamp()}] MODE: {self._state.mode.value} -> {mode.value}")
            self._state.mode = mode

    def _locate(
        self, hand: HandObservation, gestures: HandGestures, camera: CameraTransform | None
    ) -> tuple[WorldPosition, WorldPosition] | None:
        """Raw and snapped world position under the hand's index fingertip."""
        tip = gestures.index_tip
        if tip is None:
            return None

        x = 1 - tip.x if self.mirror else tip.x
        raw = map_point(x, tip.y, estimate_depth(hand.landmarks), camera)
        snapped = WorldPosition(
            snap(raw.x, self.cell_size),
            max(GROUND_Y, snap(raw.y, self.cell_size)),
            snap(raw.z, self.cell_size),
        )
        return raw, snapped

    def _try_action(self, mode: InteractionMode, cell: WorldPosition) -> BlockIntent | None:
        """Emit a block intent if this action's cooldown has elapsed."""
        s = self._state
        key = cell_key(*cell)

        if mode is InteractionMode.BUILD:
            if s.clock - s.last_build <= self.build_cooldown_s:
                return None
            s.last_build = s.clock
            intent = BlockIntent("add", cell, key)
            if self.world is not None and not self.world.exists(key):
                self.world.insert(cell, {"placed_at": s.clock})
            return intent

        if s.clock - s.last_erase <= self.erase_cooldown_s:
            return None
        s.last_erase = s.clock
        if self.world is not None:
            self.world.remove(key)
        return BlockIntent("remove", cell, key)

    def tick(
        self,
        hands: Sequence[HandObservation],
        dt: float,
        camera: CameraTransform | None = None,
    ) -> FrameResult:
        """
        Process one frame.

        Args:
            hands: 0-2 hand observations for this frame
            dt: Seconds since the previous tick (negative values are ignored)
            camera: Renderer camera for this frame; falls back to the one
                given at construction, then to the closed-form mapper

        Returns:
            FrameResult for this frame
        """
        s = self._state
        if dt > 0:
            s.clock += dt
        camera = camera if camera is not None else self.camera

        left = _find_hand(hands, "Left")
        right = _find_hand(hands, "Right")
        left_g = classify_hand(left) if left is not None else None
        right_g = classify_hand(right) if right is not None else None

        mode = select_mode(left_g, right_g)

        if mode is InteractionMode.NAVIGATE:
            self._set_mode(mode)
            nav = self.navigation.update(left, right)
            s.navigating = True
            return FrameResult(mode=mode, navigation=nav)

        if s.navigating:
            self.navigation.reset()
            s.navigating = False

        if mode is None:
            return FrameResult(mode=s.mode, navigation=self.navigation.state)

        self._set_mode(mode)
        if mode is InteractionMode.ERASE:
            cursor_hand, cursor_g, acting = left, left_g, left_g.pinching
        else:
            cursor_hand, cursor_g, acting = right, right_g, right_g.pinching

        located = self._locate(cursor_hand, cursor_g, camera)
        if located is None:
            return FrameResult(mode=mode, navigation=self.navigation.state)

        raw, cell = located
        result = FrameResult(
            mode=mode,
            navigation=self.navigation.state,
            cursor_active=True,
            raw_cursor=raw,
            cursor=cell,
        )
        if acting:
            intent = self._try_action(mode, cell)
            if intent is not None:
                result.intents.append(intent)
        return result
