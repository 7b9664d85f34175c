from enum import Enum


class Button(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class Key(Enum):
    CONFIRM = "confirm"  # toggle play/pause
    CLEAR = "clear"
    QUIT = "quit"
    OTHER = "other"


class Command(Enum):
    """What the outer event loop should do after a key press."""
    CONTINUE = "continue"
    QUIT = "quit"
