from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .interactions import Interaction

interaction_registry: dict[str, type["Interaction"]] = {}


def register_interaction(name: str):
    def _decorator(cls: type["Interaction"]) -> type["Interaction"]:
        if not name or name in interaction_registry:
            raise ValueError(f"Invalid or duplicate interaction name '{name}'")
        interaction_registry[name] = cls
        return cls
    return _decorator


def make_interaction(name: str) -> "Interaction":
    try:
        return interaction_registry[name]()
    except KeyError:
        raise ValueError(
            f"Unknown interaction '{name}', expected one of {sorted(interaction_registry)}"
        ) from None
