"""Players and the input they hand to the simulation each tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameball.world import World


def _default_orientation() -> tuple[float, float, float]:
    return (0.0, 0.0, 1.0)


@dataclass
class PlayerInput:
    """Movement requests from one player, with the direction the player faces."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    brake: bool = False
    orientation: tuple[float, float, float] = field(default_factory=_default_orientation)

    def __post_init__(self) -> None:
        x, y, z = (float(value) for value in self.orientation)
        self.orientation = (x, y, z)


class Player:
    """A participant in a world; registers itself on creation."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.primary_unit_id = 0
        self.input = PlayerInput()
        self._player_id = world.register_player(self)

    @property
    def player_id(self) -> int:
        return self._player_id

    def take_input(self) -> PlayerInput:
        """Return the pending input and reset it to the default."""
        taken = self.input
        self.input = PlayerInput()
        return taken

    def destroy(self) -> None:
        """Remove this player from its world."""
        self.world.unregister_player(self._player_id)