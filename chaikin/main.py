import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6 import QtCore, QtWidgets

from chaikin.config import ANIM_INTERVAL, DEFAULT_INTERACTION, EditorConfig
from chaikin.core import CurveEditor, interaction_registry
from chaikin.logging_config import setup_logging
from chaikin.widgets import CanvasWidget


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chaikin",
        description="Place control points and watch their Chaikin subdivision curve refine.",
    )
    parser.add_argument("--interaction", choices=sorted(interaction_registry),
                        default=DEFAULT_INTERACTION,
                        help="mouse bindings (default: %(default)s)")
    parser.add_argument("--interval", type=float, default=ANIM_INTERVAL,
                        help="seconds between playback levels (default: %(default)s)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=None,
                        help="also write the log to this file")
    return parser.parse_args(argv)


class MainWindow(QtWidgets.QWidget):
    def __init__(self, editor: CurveEditor):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.canvas = CanvasWidget(editor, self)
        self.status = QtWidgets.QLabel()
        self.status.setObjectName("Status")

        self.layout.addWidget(self.canvas, alignment=QtCore.Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.status)

        self.setWindowTitle(editor.title())
        self.canvas.pointsChanged.connect(self.refresh)
        self.canvas.levelChanged.connect(lambda _level: self.refresh())
        self.canvas.stateChanged.connect(self.refresh)
        self.canvas.quitRequested.connect(self.close)
        self.canvas.setFocus()
        self.refresh()

    @QtCore.Slot()
    def refresh(self):
        editor = self.canvas.editor
        n = len(editor.points)
        shape = "closed" if editor.closed else "open"
        state = "playing" if editor.playback.running else "paused"
        self.status.setText(
            f"{n} points ({shape}) - level {editor.playback.level}/{editor.config.max_steps} - {state}"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    config = EditorConfig(interaction=args.interaction, anim_interval=args.interval)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName("Chaikin")

    window = MainWindow(CurveEditor(config))
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
