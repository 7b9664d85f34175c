from .canvas import CanvasWidget

__all__ = [
    "CanvasWidget",
]
