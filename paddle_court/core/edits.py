"""
State edits produced by input signals
"""

from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.core.entities import StateEdit

# Key names accepted for each direction, including the browser-style aliases
KEY_ALIASES: dict[str, Direction] = {
    "left": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
}


def no_op_edit(state: GameState) -> GameState:
    """Edit of an input the game does not react to"""
    return state


def resolve_direction(key: Direction | str | None) -> Direction | None:
    """Maps a direction or a key name to a Direction, None when unrecognized"""
    if isinstance(key, Direction):
        return key
    if isinstance(key, str):
        return KEY_ALIASES.get(key.lower())
    return None


def hold_edit(direction: Direction, held: bool) -> StateEdit:
    """Edit setting the hold flag of a direction"""

    def edit(state: GameState) -> GameState:
        return state.with_held(direction, held)

    edit.__name__ = f"{'press' if held else 'release'}_{direction.value}"
    return edit


def press_edit(key: Direction | str | None) -> StateEdit:
    """Edit for a "direction pressed" signal, identity for unknown keys"""
    direction = resolve_direction(key)
    if direction is None:
        return no_op_edit
    return hold_edit(direction, True)


def release_edit(key: Direction | str | None) -> StateEdit:
    """Edit for a "direction released" signal, identity for unknown keys"""
    direction = resolve_direction(key)
    if direction is None:
        return no_op_edit
    return hold_edit(direction, False)
