"""Game state helpers: player start, controls, entities, doors and fog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

FOG_DISTANCE = 500.0
"""Distance at which fog turns any colour fully white."""

HIT_RADIUS = 15
"""Half the side of the square in which a bullet hits an enemy."""

ENEMY = 1
"""Entity type of enemies."""

DOOR_CLOSED = "P"
DOOR_OPEN = "p"

TURN_STEP = 4
"""Degrees turned per frame while a turn key is held."""

KEY_ESCAPE = 0xFF1B
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_SPACE = 32
KEY_USE = 102

_FACING_BASE = {"W": 180.0, "E": 0.0, "N": 90.0, "S": 270.0}

_MOVE_KEYS = {
    119: "forward",
    115: "back",
    97: "left",
    100: "right",
    113: "turn_left",
    KEY_LEFT: "turn_left",
    101: "turn_right",
    KEY_RIGHT: "turn_right",
}

_ACTION_KEYS = {KEY_SPACE: "shoot", KEY_USE: "door", KEY_ESCAPE: "quit"}

_SHOT_SPEEDS = {2: 3.0}
_DEFAULT_SHOT_SPEED = 1.0


@dataclass
class Entity:
    """A sprite in the world: an enemy (type 1) or a projectile."""

    x: float
    y: float
    type: int = ENEMY
    killed: bool = False
    destroyed: bool = False
    seen: bool = False


@dataclass
class Player:
    """The player's position in screen units, view rotation in degrees, and health."""

    x: float
    y: float
    rot: float = 0.0
    health: int = 100


@dataclass
class Controls:
    """Which movement and turn keys are currently held down."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    turn_left: bool = False
    turn_right: bool = False

    def press(self, code: int) -> str | None:
        """Record a key press.

        Returns "shoot", "door" or "quit" for keys that trigger an action,
        None for movement keys and unknown keys.
        """
        held = _MOVE_KEYS.get(code)
        if held is not None:
            setattr(self, held, True)
            return None
        return _ACTION_KEYS.get(code)

    def release(self, code: int) -> None:
        """Record a key release."""
        held = _MOVE_KEYS.get(code)
        if held is not None:
            setattr(self, held, False)

    def rotation_delta(self) -> int:
        """Return the change of view rotation for one frame, in degrees."""
        delta = 0
        if self.turn_left:
            delta += TURN_STEP
        if self.turn_right:
            delta -= TURN_STEP
        return delta


def fog_color(color: int, dist_to_wall: float) -> int:
    """Blend a 0xRRGGBB colour towards white in proportion to distance."""
    factor = dist_to_wall / FOG_DISTANCE
    channels = []
    for shift in (16, 8, 0):
        value = (color >> shift) & 0xFF
        channels.append(min(255, int(value + (255 - value) * factor)))
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


def start_rotation(facing: str, fov: float) -> float:
    """Return the initial view rotation for a start cell facing N, S, E or W."""
    base = _FACING_BASE.get(facing)
    if base is None:
        return 0.0
    return base - fov / 2


def player_start(
    grid: Sequence[Sequence[str]], screen_width: int, screen_height: int, fov: float
) -> Player:
    """Place the player at the centre of the start cell of the map grid."""
    rows = len(grid)
    cols = max((len(row) for row in grid), default=0)
    if rows == 0 or cols == 0:
        raise ValueError("empty map grid")
    cell_w = screen_width // cols
    cell_h = screen_height // rows
    player: Player | None = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell and cell in "EWNS":
                player = Player(
                    x=j * cell_w + cell_w // 2,
                    y=i * cell_h + cell_h // 2,
                    rot=start_rotation(cell, fov),
                )
    if player is None:
        raise ValueError("map has no start position")
    return player


def bullet_collisions(entities: Sequence[Entity], index: int) -> int | None:
    """Check the projectile at index against living enemies.

    On a hit the projectile is destroyed and the first enemy hit is killed;
    the index of that enemy is returned, otherwise None.
    """
    bullet = entities[index]
    for m, target in enumerate(entities):
        if target.type != ENEMY or target.killed:
            continue
        if (
            target.x - HIT_RADIUS < bullet.x < target.x + HIT_RADIUS
            and target.y - HIT_RADIUS < bullet.y < target.y + HIT_RADIUS
        ):
            bullet.destroyed = True
            target.killed = True
            return m
    return None


def reset_entities(entities: Iterable[Entity]) -> None:
    """Mark every entity as not seen."""
    for entity in entities:
        entity.seen = False


def toggle_door(grid: list[list[str]], row: int, col: int) -> str:
    """Open a closed door or close an open one; return the new cell."""
    grid[row][col] = DOOR_OPEN if grid[row][col] == DOOR_CLOSED else DOOR_CLOSED
    return grid[row][col]


def door_at(
    grid: Sequence[Sequence[str]], x: float, y: float, cell_width: float, cell_height: float
) -> tuple[int, int] | None:
    """Return (row, col) of the door cell holding point (x, y), or None."""
    row = int(y / cell_height)
    col = int(x / cell_width)
    if grid[row][col] in (DOOR_CLOSED, DOOR_OPEN):
        return row, col
    return None


def mouse_rotation(last_x: int, x: int) -> int:
    """Return the rotation change for a horizontal mouse move from last_x to x."""
    if last_x < x:
        return -1
    if last_x > x:
        return 1
    return 0


def shot_speed(shot_type: int) -> float:
    """Return the speed factor of a projectile type: 3 for type 2, else 1."""
    speed = _SHOT_SPEEDS.get(shot_type, _DEFAULT_SHOT_SPEED)
    return float(speed)


def sprite_files() -> dict[str, tuple[str, ...]]:
    """Return the texture files of walls, sprites, gun frames and enemy frames."""
    return {
        "walls": (
            "./textures/01.xpm",
            "./textures/02.xpm",
            "./textures/01.xpm",
            "./textures/texture_03.xpm",
            "./textures/door.xpm",
        ),
        "sprites": ("./textures/enemy.xpm", "./textures/BULLET.xpm"),
        "gun": (
            "./textures/t0.xpm",
            "./textures/t1.xpm",
            "./textures/t2.xpm",
            "./textures/t3.xpm",
        ),
        "enemy": (
            "./textures/ea.xpm",
            "./textures/eb.xpm",
            "./textures/ec.xpm",
            "./textures/ed.xpm",
            "./textures/ee.xpm",
        ),
    }