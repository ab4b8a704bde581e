"""Sprites: geometry plus life cycle, drawing state and simple motion."""

from __future__ import annotations

import math

from .sprite_geometry import SpriteGeometry
from .vector import Vector, deg2rad, rad2deg

MAX_TIME_TO_DIE = 2**31 - 1


def _vector_arg(x: float | Vector, y: float | None, name: str) -> Vector:
    if isinstance(x, Vector):
        return Vector(float(x.x), float(x.y))
    if y is None:
        raise TypeError(f"{name}() needs a Vector or both components")
    return Vector(float(x), float(y))


class Sprite(SpriteGeometry):
    """A game object with position, size, motion and life-cycle flags.

    Motion is kept as a unit direction vector and a scalar speed.
    Directions are in degrees, anti-clockwise, with 0 pointing upwards.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 0.0,
        h: float = 0.0,
        time: int = 0,
    ) -> None:
        super().__init__(x, y, w, h)
        self.time = int(time)
        self.time_death = 0
        self.is_deleted = False
        self.is_valid = False
        self.state = 0
        self.health = 0.0
        self.mass = 0.0
        self._direction = Vector(0.0, 0.0)
        self.speed = 0.0

    # Deleting

    def delete(self) -> None:
        """Mark the sprite as deleted."""
        self.is_deleted = True

    def undelete(self) -> None:
        self.is_deleted = False

    # Dying

    def die(self, time: int) -> None:
        """Schedule deletion the given number of milliseconds from now."""
        self.time_death = self.time + int(time)

    def undie(self) -> None:
        self.time_death = 0

    @property
    def is_dying(self) -> bool:
        return self.time_death != 0

    def time_to_die(self) -> int:
        """Milliseconds left before death; a large constant if not dying."""
        if self.is_dying:
            return self.time_death - self.time
        return MAX_TIME_TO_DIE

    @property
    def is_dead(self) -> bool:
        return self.is_dying and self.time_to_die() <= 0

    # Drawing state

    def invalidate(self) -> None:
        self.is_valid = False

    def validate(self) -> None:
        self.is_valid = True

    # Time

    def reset_time(self, time: int) -> None:
        self.time = int(time)

    # Velocity

    @property
    def velocity(self) -> Vector:
        return self._direction * self.speed

    def set_velocity(self, vx: float | Vector, vy: float | None = None) -> None:
        """Set direction and speed from a velocity vector."""
        vec = _vector_arg(vx, vy, "set_velocity")
        self._direction = vec.normalized()
        self.speed = vec.length()

    @property
    def x_velocity(self) -> float:
        return self.velocity.x

    @x_velocity.setter
    def x_velocity(self, vx: float) -> None:
        self.set_velocity(vx, self.y_velocity)

    @property
    def y_velocity(self) -> float:
        return self.velocity.y

    @y_velocity.setter
    def y_velocity(self, vy: float) -> None:
        self.set_velocity(self.x_velocity, vy)

    # Direction

    @property
    def normalised_velocity(self) -> Vector:
        return self._direction

    def set_normalised_velocity(self, vx: float | Vector, vy: float | None = None) -> None:
        """Set the direction of motion without changing the speed."""
        self._direction = _vector_arg(vx, vy, "set_normalised_velocity").normalized()

    @property
    def direction(self) -> float:
        return rad2deg(math.atan2(self._direction.x, self._direction.y))

    def set_direction(self, degrees: float) -> None:
        rad = deg2rad(degrees)
        self._direction = Vector(math.sin(rad), math.cos(rad))

    def set_direction_towards(self, dx: float | Vector, dy: float | None = None) -> None:
        """Point the motion along the given vector."""
        vec = _vector_arg(dx, dy, "set_direction_towards")
        self.set_direction(rad2deg(math.atan2(vec.x, vec.y)))

    # Motion

    def proceed(self, pixels: float) -> None:
        """Move along the current direction by a distance."""
        self.move(self._direction * pixels)

    def proceed_velocity(self, msecs: int) -> None:
        """Move with the current speed for the given number of milliseconds."""
        self.proceed(self.speed * msecs / 1000)

    # Dynamics

    def accelerate(self, ax: float | Vector, ay: float | None = None) -> None:
        self.set_velocity(self.velocity + _vector_arg(ax, ay, "accelerate"))

    def apply_force(self, fx: float | Vector, fy: float | None = None) -> None:
        """Accelerate by force / mass; does nothing while the mass is not positive."""
        force = _vector_arg(fx, fy, "apply_force")
        if self.mass > 0:
            self.accelerate(force / self.mass)