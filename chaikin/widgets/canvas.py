import logging
from typing import Optional, Sequence, override

from PySide6 import QtCore, QtGui, QtWidgets

from chaikin.config import POINT_INNER_R, POINT_OUTER_R
from chaikin.core import Button, Command, CurveEditor, Frame, Key, Point
from chaikin.widgets.utils import point_to_qpoint, qpoint_to_point

logger = logging.getLogger(__name__)

_BUTTONS = {
    QtCore.Qt.MouseButton.LeftButton: Button.PRIMARY,
    QtCore.Qt.MouseButton.RightButton: Button.SECONDARY,
}

_KEYS = {
    QtCore.Qt.Key.Key_Return: Key.CONFIRM,
    QtCore.Qt.Key.Key_Enter: Key.CONFIRM,  # keypad
    QtCore.Qt.Key.Key_C: Key.CLEAR,
    QtCore.Qt.Key.Key_Escape: Key.QUIT,
}

REDRAW_MS = 16


class CanvasWidget(QtWidgets.QWidget):
    """
    Qt view/controller for a CurveEditor.
    Translates Qt input into editor events and paints the editor's Frame.
    """

    pointsChanged = QtCore.Signal()       # emitted whenever control points change (add/move/clear)
    levelChanged = QtCore.Signal(int)     # emitted when the displayed refinement level changes
    stateChanged = QtCore.Signal()        # emitted after a handled key (playback toggle, clear)
    quitRequested = QtCore.Signal()

    def __init__(self, editor: Optional[CurveEditor] = None, parent=None):
        super().__init__(parent)
        self._editor = editor or CurveEditor()
        self._shown_level = -1

        cfg = self._editor.config
        self.setFixedSize(int(cfg.width), int(cfg.height))
        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

        # keep repainting so playback advances and drags stay smooth
        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self.update)
        self._timer.start(REDRAW_MS)

    # ---- convenience accessors ---------------------------------------------
    @property
    def editor(self) -> CurveEditor:
        return self._editor

    # ---- size hints ---------------------------------------------------------
    @override
    def sizeHint(self):
        cfg = self._editor.config
        return QtCore.QSize(int(cfg.width), int(cfg.height))

    # ---- mouse events -------------------------------------------------------
    @override
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        button = _BUTTONS.get(e.button())
        if button is None:
            return
        x, y = qpoint_to_point(e.position())
        before = len(self._editor.points)
        self._editor.button_pressed(button, x, y)
        if len(self._editor.points) != before:
            self.pointsChanged.emit()
        self.update()

    @override
    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        pos = qpoint_to_point(e.position())
        dragging = self._editor.dragging is not None
        self._editor.pointer_moved(*pos)
        if dragging and self._editor.dragging is not None:
            self.pointsChanged.emit()
            self.update()
            return
        idx = self._editor.point_at(pos)
        self.setCursor(
            QtCore.Qt.CursorShape.SizeAllCursor if idx is not None
            else QtCore.Qt.CursorShape.CrossCursor
        )

    @override
    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        button = _BUTTONS.get(e.button())
        if button is not None:
            self._editor.button_released(button)

    @override
    def keyPressEvent(self, e: QtGui.QKeyEvent):
        key = _KEYS.get(e.key(), Key.OTHER)
        if key == Key.OTHER:
            super().keyPressEvent(e)
            return
        before = len(self._editor.points)
        if self._editor.key_pressed(key) == Command.QUIT:
            self._timer.stop()
            self.quitRequested.emit()
            return
        if len(self._editor.points) != before:
            self.pointsChanged.emit()
        self.stateChanged.emit()
        self.update()

    # ---- painting -----------------------------------------------------------
    def _draw_polyline(self, painter: QtGui.QPainter, pts: Sequence[Point], closed: bool):
        for i in range(len(pts) - 1):
            painter.drawLine(point_to_qpoint(pts[i]), point_to_qpoint(pts[i + 1]))
        if closed and len(pts) >= 2:
            painter.drawLine(point_to_qpoint(pts[-1]), point_to_qpoint(pts[0]))

    def _draw_control(self, painter: QtGui.QPainter, pts: Sequence[Point]):
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        for pt in pts:
            center = point_to_qpoint(pt)
            painter.setBrush(QtGui.QColor(220, 40, 40))
            painter.drawEllipse(center, POINT_OUTER_R, POINT_OUTER_R)
            painter.setBrush(QtGui.QColor.fromRgbF(0.12, 0.12, 0.12))
            painter.drawEllipse(center, POINT_INNER_R, POINT_INNER_R)

    def _paint_frame(self, painter: QtGui.QPainter, frame: Frame):
        painter.fillRect(self.rect(), QtGui.QColor.fromRgbF(0.07, 0.07, 0.07))

        painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255, 60), 1.0, QtCore.Qt.PenStyle.DashLine))
        self._draw_polyline(painter, frame.context, frame.closed)

        painter.setPen(QtGui.QPen(QtGui.QColor(60, 220, 90), 2.0))
        self._draw_polyline(painter, frame.curve, frame.closed)

        self._draw_control(painter, frame.control_points)

    @override
    def paintEvent(self, _):
        frame = self._editor.frame()
        if frame.level != self._shown_level:
            self._shown_level = frame.level
            logger.debug("Showing level %d (%d points)", frame.level, len(frame.curve))
            self.levelChanged.emit(frame.level)

        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        self._paint_frame(p, frame)
        p.end()
