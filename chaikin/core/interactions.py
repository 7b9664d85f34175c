from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .events import Button
from .math import Point
from .registries import register_interaction

if TYPE_CHECKING:
    from .editor import CurveEditor


class Interaction(ABC):
    """
    Maps mouse buttons to editor commands (append, begin drag, end drag).
    GUI-agnostic: positions arrive already clamped to the canvas.
    """
    bindings: str = ""

    @abstractmethod
    def press(self, editor: "CurveEditor", button: Button, pos: Point) -> None:
        """
        React to a button press at pos.
        """

    @abstractmethod
    def release(self, editor: "CurveEditor", button: Button) -> None:
        """
        React to a button release.
        """


@register_interaction("right-drag")
class RightDragInteraction(Interaction):
    """
      - primary press: append a point.
      - secondary press: drag the point under the cursor, if any.
      - secondary release: end the drag.
    """
    bindings = "Left-click add, right-drag to move"

    def press(self, editor: "CurveEditor", button: Button, pos: Point) -> None:
        if button == Button.SECONDARY:
            idx = editor.point_at(pos)
            if idx is not None:
                editor.begin_drag(idx)
        elif button == Button.PRIMARY:
            editor.add_point(pos)

    def release(self, editor: "CurveEditor", button: Button) -> None:
        if button == Button.SECONDARY:
            editor.end_drag()


@register_interaction("left-click")
class LeftClickInteraction(Interaction):
    """
    Single-button editing: a primary press drags the point under the cursor,
    or appends a new one when nothing is hit.
    """
    bindings = "Left-click add, drag to move"

    def press(self, editor: "CurveEditor", button: Button, pos: Point) -> None:
        if button != Button.PRIMARY:
            return
        idx = editor.point_at(pos)
        if idx is not None:
            editor.begin_drag(idx)
        else:
            editor.add_point(pos)

    def release(self, editor: "CurveEditor", button: Button) -> None:
        if button == Button.PRIMARY:
            editor.end_drag()
