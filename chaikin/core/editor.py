from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from chaikin.config import EditorConfig
from .events import Button, Command, Key
from .math import Point, clamp_point
from .path import ControlPath
from .playback import Playback
from .registries import make_interaction
from .subdivision import build_cache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """
    Everything the renderer needs for one paint:
      - control_points: markers to draw
      - context: faint control polyline (empty below 3 points)
      - curve: highlighted polyline at the displayed level
      - closed: also connect last -> first for context and curve
    """
    control_points: tuple[Point, ...]
    context: tuple[Point, ...]
    curve: tuple[Point, ...]
    closed: bool
    level: int
    running: bool


class CurveEditor:
    """
    Application state of the curve editor: control points, cached refinement
    levels, playback and drag state.

    One instance is owned by the event loop and every handler runs to
    completion before the next one starts. Any structural edit rebuilds the
    full cache.
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.interaction = make_interaction(self.config.interaction)
        self.path = ControlPath(radius=self.config.click_radius)
        self.playback = Playback(max_steps=self.config.max_steps,
                                 interval=self.config.anim_interval,
                                 last_advance=time.monotonic())
        self.dragging: Optional[int] = None
        self.last_pos: Point = (0.0, 0.0)
        self.levels: list[list[Point]] = []
        self.recompute_cache()

    # ---- convenience accessors ---------------------------------------------
    @property
    def points(self) -> list[Point]:
        return self.path.points

    @property
    def closed(self) -> bool:
        return self.path.closed

    def title(self) -> str:
        return f"Chaikin ---> {self.interaction.bindings}, Enter start/pause, C clear, Esc quit"

    # ---- commands -----------------------------------------------------------
    def recompute_cache(self) -> None:
        self.levels = build_cache(self.path.points, self.config.max_steps,
                                  closed_hint=False, radius=self.config.click_radius)
        self.playback.clamp(len(self.levels))

    def point_at(self, pos: Point) -> Optional[int]:
        return self.path.find_near(pos, self.config.click_radius)

    def add_point(self, pos: Point) -> None:
        self.path.add_point(pos)
        self.recompute_cache()

    def begin_drag(self, index: int) -> None:
        logger.debug("Begin drag of point %d", index)
        self.dragging = index

    def end_drag(self) -> None:
        self.dragging = None

    def clear(self) -> None:
        self.path.clear()
        self.dragging = None
        self.recompute_cache()
        self.playback.reset()
        logger.info("Cleared control points")

    def toggle_playback(self, now: Optional[float] = None) -> bool:
        now = time.monotonic() if now is None else now
        return self.playback.toggle(len(self.path), now)

    # ---- input events -------------------------------------------------------
    def _to_point(self, x: float, y: float) -> Point:
        return clamp_point((x, y), self.config.width, self.config.height)

    def pointer_moved(self, x: float, y: float) -> None:
        self.last_pos = (float(x), float(y))
        if self.dragging is None:
            return
        if self.dragging >= len(self.path):
            # the point went away (e.g. a clear) since the drag began
            logger.debug("Dropping stale drag of point %d", self.dragging)
            self.dragging = None
            return
        self.path.edit_point(self.dragging, self._to_point(x, y))
        self.recompute_cache()

    def button_pressed(self, button: Button, x: Optional[float] = None, y: Optional[float] = None) -> None:
        if x is not None and y is not None:
            self.last_pos = (float(x), float(y))
        self.interaction.press(self, button, self._to_point(*self.last_pos))

    def button_released(self, button: Button) -> None:
        self.interaction.release(self, button)

    def key_pressed(self, key: Key, now: Optional[float] = None) -> Command:
        match key:
            case Key.QUIT:
                logger.info("Quit requested")
                return Command.QUIT
            case Key.CONFIRM:
                self.toggle_playback(now)
            case Key.CLEAR:
                self.clear()
            case _:
                pass
        return Command.CONTINUE

    # ---- rendering ----------------------------------------------------------
    def frame(self, now: Optional[float] = None) -> Frame:
        """
        Advance playback for this render and describe what to draw.
        Below 3 control points the raw points are drawn instead of a level.
        """
        now = time.monotonic() if now is None else now
        pts = tuple(self.path.points)
        level = self.playback.tick(len(pts), now)

        if len(pts) >= 3:
            context = pts
            curve = tuple(self.levels[level])
        else:
            context = ()
            curve = pts

        return Frame(
            control_points=pts,
            context=context,
            curve=curve,
            closed=self.path.closed,
            level=level,
            running=self.playback.running,
        )
