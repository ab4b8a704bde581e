"""Position, pivot point and extent of a sprite."""

from __future__ import annotations

from .rectangle import Rectangle
from .vector import Vector


def _as_vector(x: float | Vector, y: float | None, name: str) -> Vector:
    if isinstance(x, Vector):
        return x
    if y is None:
        raise TypeError(f"{name}() needs a Vector or both x and y")
    return Vector(x, y)


class SpriteGeometry:
    """Where a sprite is and how large it is.

    The sprite's position is the position of its pivot point; the
    bottom-left and top-right corners are kept relative to that point.
    A new geometry has its pivot in the centre of its w x h area.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, w: float = 0.0, h: float = 0.0) -> None:
        self.pos = Vector(float(x), float(y))
        self.bottom_left_local = Vector(-w / 2, -h / 2)
        self.top_right_local = Vector(w / 2, h / 2)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pos={self.pos!r}, "
            f"bottom_left_local={self.bottom_left_local!r}, "
            f"top_right_local={self.top_right_local!r})"
        )

    # Position of the pivot point

    @property
    def position(self) -> Vector:
        return self.pos

    @position.setter
    def position(self, v: Vector) -> None:
        self.pos = v

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float) -> None:
        self.pos = Vector(value, self.pos.y)

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float) -> None:
        self.pos = Vector(self.pos.x, value)

    def move(self, dx: float | Vector, dy: float | None = None) -> None:
        """Shift the sprite by a vector or by (dx, dy)."""
        self.pos = self.pos + _as_vector(dx, dy, "move")

    # Sides in local coordinates (relative to the pivot point)

    @property
    def left_local(self) -> float:
        return self.bottom_left_local.x

    @left_local.setter
    def left_local(self, value: float) -> None:
        self.bottom_left_local = Vector(value, self.bottom_left_local.y)

    @property
    def bottom_local(self) -> float:
        return self.bottom_left_local.y

    @bottom_local.setter
    def bottom_local(self, value: float) -> None:
        self.bottom_left_local = Vector(self.bottom_left_local.x, value)

    @property
    def right_local(self) -> float:
        return self.top_right_local.x

    @right_local.setter
    def right_local(self, value: float) -> None:
        self.top_right_local = Vector(value, self.top_right_local.y)

    @property
    def top_local(self) -> float:
        return self.top_right_local.y

    @top_local.setter
    def top_local(self, value: float) -> None:
        self.top_right_local = Vector(self.top_right_local.x, value)

    # Sides in global coordinates (no rotation taken into account)

    @property
    def bottom_left(self) -> Vector:
        return self.pos + self.bottom_left_local

    @bottom_left.setter
    def bottom_left(self, v: Vector) -> None:
        self.bottom_left_local = v - self.pos

    @property
    def top_right(self) -> Vector:
        return self.pos + self.top_right_local

    @top_right.setter
    def top_right(self, v: Vector) -> None:
        self.top_right_local = v - self.pos

    @property
    def left(self) -> float:
        return self.x + self.left_local

    @left.setter
    def left(self, value: float) -> None:
        self.left_local = value - self.x

    @property
    def bottom(self) -> float:
        return self.y + self.bottom_local

    @bottom.setter
    def bottom(self, value: float) -> None:
        self.bottom_local = value - self.y

    @property
    def right(self) -> float:
        return self.x + self.right_local

    @right.setter
    def right(self, value: float) -> None:
        self.right_local = value - self.x

    @property
    def top(self) -> float:
        return self.y + self.top_local

    @top.setter
    def top(self, value: float) -> None:
        self.top_local = value - self.y

    # Size

    @property
    def size(self) -> Vector:
        return self.top_right_local - self.bottom_left_local

    @property
    def width(self) -> float:
        return self.top_right_local.x - self.bottom_left_local.x

    @property
    def height(self) -> float:
        return self.top_right_local.y - self.bottom_left_local.y

    # Centre and pivot

    def center_local(self) -> Vector:
        """Geometrical centre relative to the pivot point."""
        return (self.bottom_left_local + self.top_right_local) / 2

    @property
    def pivot_from_center(self) -> Vector:
        """Pivot point relative to the geometrical centre."""
        return -self.center_local()

    # Rectangles

    def client_rect(self) -> Rectangle:
        """Rectangle at (0, 0) with the size of the sprite."""
        return Rectangle(0, 0, int(self.width), int(self.height))

    def no_rot_bounding_rect(self) -> Rectangle:
        """Screen rectangle covering the sprite, ignoring any rotation."""
        return Rectangle(int(self.left), int(self.bottom), int(self.width), int(self.height))