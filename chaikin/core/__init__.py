from .math import Point, dist2, clamp_point
from .subdivision import chaikin_step, is_closed, detect_and_normalize, build_cache
from .path import ControlPath
from .playback import Playback
from .events import Button, Key, Command
from .registries import interaction_registry, register_interaction, make_interaction
from .interactions import Interaction, RightDragInteraction, LeftClickInteraction
from .editor import CurveEditor, Frame
