"""
Configuration
=============
Central registry for the constants shared by the curve engine, the editor and
the Qt canvas.

The constants form the behavioural contract of the editor: changing
CLICK_RADIUS changes both hit-testing and closed-curve detection, and
MAX_STEPS fixes the number of cached refinement levels (MAX_STEPS + 1).

Exports:
    WIDTH, HEIGHT (float): Canvas size; input is clamped into it.
    MAX_STEPS (int): Number of subdivision passes cached per edit.
    CLICK_RADIUS (float): Hit radius and closing distance, in canvas units.
    ANIM_INTERVAL (float): Seconds between two playback levels.
    POINT_OUTER_R, POINT_INNER_R (float): Control point marker radii.
    EditorConfig: Per-run overrides of the above.
"""
from dataclasses import dataclass

WIDTH: float = 1024.0
HEIGHT: float = 860.0
MAX_STEPS: int = 7
CLICK_RADIUS: float = 10.0
ANIM_INTERVAL: float = 1.0
POINT_OUTER_R: float = 7.0
POINT_INNER_R: float = 3.0

DEFAULT_INTERACTION = "right-drag"


@dataclass(frozen=True)
class EditorConfig:
    width: float = WIDTH
    height: float = HEIGHT
    max_steps: int = MAX_STEPS
    click_radius: float = CLICK_RADIUS
    anim_interval: float = ANIM_INTERVAL
    interaction: str = DEFAULT_INTERACTION

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")
        if self.click_radius <= 0:
            raise ValueError(f"click_radius must be positive, got {self.click_radius}")
        if self.anim_interval <= 0:
            raise ValueError(f"anim_interval must be positive, got {self.anim_interval}")
