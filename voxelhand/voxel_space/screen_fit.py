"""Fitting the camera image onto a display for overlay alignment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContainFit:
    scale: float
    offset_x: float
    offset_y: float
    scaled_width: float
    scaled_height: float


def get_contain_dimensions(
    video: tuple[float, float], screen: tuple[float, float]
) -> ContainFit:
    """
    Scale and offsets that show the whole video centered on the screen,
    preserving aspect ratio (letterbox / pillarbox).

    Args:
        video: (width, height) of the camera image
        screen: (width, height) of the display
    """
    vw, vh = video
    sw, sh = screen
    if vw == 0 or vh == 0 or sw == 0 or sh == 0:
        return ContainFit(1.0, 0.0, 0.0, 0.0, 0.0)

    if sw / sh > vw / vh:
        # Screen wider than video: bars on the sides
        scale = sh / vh
    else:
        scale = sw / vw

    scaled_w = vw * scale
    scaled_h = vh * scale
    return ContainFit(scale, (sw - scaled_w) / 2, (sh - scaled_h) / 2, scaled_w, scaled_h)


def video_to_screen_coordinates(
    x_norm: float,
    y_norm: float,
    video: tuple[float, float],
    screen: tuple[float, float],
    mirror_x: bool = True,
) -> tuple[float, float]:
    """Normalized video coordinates -> screen pixels."""
    fit = get_contain_dimensions(video, screen)
    x_video = 1 - x_norm if mirror_x else x_norm
    return (
        x_video * video[0] * fit.scale + fit.offset_x,
        y_norm * video[1] * fit.scale + fit.offset_y,
    )


def video_to_ndc(
    x_norm: float,
    y_norm: float,
    video: tuple[float, float],
    screen: tuple[float, float],
    mirror_x: bool = True,
) -> tuple[float, float]:
    """Normalized video coordinates -> NDC of the display (Y up)."""
    sx, sy = video_to_screen_coordinates(x_norm, y_norm, video, screen, mirror_x)
    return sx / screen[0] * 2 - 1, -(sy / screen[1]) * 2 + 1
