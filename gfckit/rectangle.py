"""Axis-aligned integer rectangles with a bottom-left origin."""

from __future__ import annotations

from .vector import Vector


def _half(n: int) -> int:
    """Integer halving that truncates towards zero."""
    return -((-n) // 2) if n < 0 else n // 2


class Rectangle:
    """A rectangle given by its bottom-left corner (x, y) and its size (w, h).

    Width and height are kept non-negative.
    """

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: int = 0, y: int = 0, w: int = 0, h: int = 0) -> None:
        self.set(x, y, w, h)

    def __repr__(self) -> str:
        return f"Rectangle(x={self.x}, y={self.y}, w={self.w}, h={self.h})"

    # Geometry

    @property
    def left(self) -> int:
        return self.x

    @property
    def bottom(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def top(self) -> int:
        return self.y + self.h

    @property
    def center_x(self) -> int:
        return self.x + self.w // 2

    @property
    def center_y(self) -> int:
        return self.y + self.h // 2

    # Setting

    def set(self, x: int, y: int, w: int, h: int) -> Rectangle:
        """Set corner and size; a negative size turns the rectangle inside out."""
        x, y, w, h = int(x), int(y), int(w), int(h)
        if w < 0:
            w = -w
            x -= w
        if h < 0:
            h = -h
            y -= h
        self.x, self.y, self.w, self.h = x, y, w, h
        return self

    def set_coll(self, x: int, y: int, w: int, h: int) -> Rectangle:
        """Set corner and size; a negative size collapses to zero."""
        self.x, self.y = int(x), int(y)
        self.w, self.h = max(int(w), 0), max(int(h), 0)
        return self

    def set_tops(self, x0: int, y0: int, x1: int, y1: int) -> Rectangle:
        """Set from two corners; reversed corners turn the rectangle inside out."""
        return self.set(x0, y0, x1 - x0, y1 - y0)

    def set_tops_coll(self, x0: int, y0: int, x1: int, y1: int) -> Rectangle:
        """Set from two corners; reversed corners collapse to their midpoint."""
        if x1 < x0:
            x0 = x1 = _half(x0 + x1)
        if y1 < y0:
            y0 = y1 = _half(y0 + y1)
        return self.set(x0, y0, x1 - x0, y1 - y0)

    def copy(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.w, self.h)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y)

    def y_inv(self, height: int) -> Rectangle:
        """Flip the rectangle vertically within a space of the given height."""
        self.y = height - self.y - self.h
        return self

    def set_empty(self) -> Rectangle:
        return self.set(0, 0, 0, 0)

    def is_empty(self) -> bool:
        return self.w == 0 or self.h == 0

    # Moving and resizing

    def offset(self, dx: int | Vector, dy: int | None = None) -> Rectangle:
        if isinstance(dx, Vector):
            dx, dy = int(dx.x), int(dx.y)
        elif dy is None:
            raise TypeError("offset() needs a Vector or both dx and dy")
        self.x += int(dx)
        self.y += int(dy)
        return self

    def move_to(self, x: int | Vector, y: int | None = None) -> Rectangle:
        if isinstance(x, Vector):
            x, y = int(x.x), int(x.y)
        elif y is None:
            raise TypeError("move_to() needs a Vector or both x and y")
        self.x, self.y = int(x), int(y)
        return self

    def grow(
        self,
        left: int,
        right: int | None = None,
        top: int | None = None,
        bottom: int | None = None,
    ) -> Rectangle:
        """Grow by four margins, by (horizontal, vertical), or by one amount."""
        if right is None:
            left = right = top = bottom = left
        elif top is None:
            hor, ver = left, right
            left, right, top, bottom = hor, hor, ver, ver
        elif bottom is None:
            raise TypeError("grow() takes one, two or four amounts")
        return self.set(
            self.x - left, self.y - bottom, self.w + left + right, self.h + top + bottom
        )

    # Union and intersection

    def union(self, other: Rectangle) -> Rectangle:
        return self.set_tops(
            min(self.left, other.left),
            min(self.bottom, other.bottom),
            max(self.right, other.right),
            max(self.top, other.top),
        )

    def intersection(self, other: Rectangle) -> Rectangle:
        return self.set_tops_coll(
            max(self.left, other.left),
            max(self.bottom, other.bottom),
            min(self.right, other.right),
            min(self.top, other.top),
        )

    # Tests

    def contains(self, x: int | Vector, y: int | None = None) -> bool:
        """Point test, edges included."""
        if isinstance(x, Vector):
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("contains() needs a Vector or both x and y")
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def intersects(self, other: Rectangle) -> bool:
        """True if the rectangles overlap with a non-zero area."""
        return (
            min(self.right, other.right) > max(self.left, other.left)
            and min(self.top, other.top) > max(self.bottom, other.bottom)
        )

    # Operators

    def __add__(self, other: Vector | Rectangle) -> Rectangle:
        if isinstance(other, Vector):
            return self.copy().offset(other)
        if isinstance(other, Rectangle):
            return self.copy().union(other)
        return NotImplemented

    def __sub__(self, vec: Vector) -> Rectangle:
        if not isinstance(vec, Vector):
            return NotImplemented
        return self.copy().offset(-vec)

    def __mul__(self, other: Rectangle) -> Rectangle:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.copy().intersection(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    __hash__ = None