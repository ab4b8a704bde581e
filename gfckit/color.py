"""RGBA colours with 8-bit channels and the usual palette helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every channel is stored as an unsigned 8-bit value."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, int(getattr(self, name)) & 0xFF)

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))

    # Arithmetic operators

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(min(x + y, _CHANNEL_MAX) for x, y in zip(self, other)))

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(max(x - y, 0) for x, y in zip(self, other)))

    def __mul__(self, other: Color | int) -> Color:
        if isinstance(other, int) and not isinstance(other, bool):
            other = Color(other, other, other, _CHANNEL_MAX)
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*((x * y) // _CHANNEL_MAX for x, y in zip(self, other)))

    def __or__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(x | y for x, y in zip(self, other)))

    def __and__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(x & y for x, y in zip(self, other)))

    def __xor__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(x ^ y for x, y in zip(self, other)))

    def __invert__(self) -> Color:
        return self ^ Color(_CHANNEL_MAX, _CHANNEL_MAX, _CHANNEL_MAX)

    # Primary colours

    @classmethod
    def red(cls, shade: int = 255) -> Color:
        return cls(shade, 0, 0)

    @classmethod
    def green(cls, shade: int = 255) -> Color:
        return cls(0, shade, 0)

    @classmethod
    def blue(cls, shade: int = 255) -> Color:
        return cls(0, 0, shade)

    # Secondary colours

    @classmethod
    def yellow(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.green(shade)

    @classmethod
    def cyan(cls, shade: int = 255) -> Color:
        return cls.green(shade) | cls.blue(shade)

    @classmethod
    def magenta(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.blue(shade)

    # Dark colours

    @classmethod
    def dark_red(cls, shade: int = 128) -> Color:
        return cls.red(shade)

    @classmethod
    def dark_green(cls, shade: int = 128) -> Color:
        return cls.green(shade)

    @classmethod
    def dark_blue(cls, shade: int = 128) -> Color:
        return cls.blue(shade)

    @classmethod
    def dark_yellow(cls, shade: int = 128) -> Color:
        return cls.yellow(shade)

    @classmethod
    def dark_cyan(cls, shade: int = 128) -> Color:
        return cls.cyan(shade)

    @classmethod
    def dark_magenta(cls, shade: int = 128) -> Color:
        return cls.magenta(shade)

    # Light colours

    @classmethod
    def light_red(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.red(shade) | cls.white(gray)

    @classmethod
    def light_green(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.green(shade) | cls.white(gray)

    @classmethod
    def light_blue(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.blue(shade) | cls.white(gray)

    @classmethod
    def light_yellow(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.yellow(shade) | cls.white(gray)

    @classmethod
    def light_cyan(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.cyan(shade) | cls.white(gray)

    @classmethod
    def light_magenta(cls, gray: int = 128, shade: int = 255) -> Color:
        return cls.magenta(shade) | cls.white(gray)

    # Greyscale

    @classmethod
    def white(cls, shade: int = 255) -> Color:
        return cls.red(shade) | cls.green(shade) | cls.blue(shade)

    @classmethod
    def light_gray(cls, shade: int = 192) -> Color:
        return cls.white(shade)

    @classmethod
    def dark_gray(cls, shade: int = 128) -> Color:
        return cls.white(shade)

    @classmethod
    def black(cls, shade: int = 0) -> Color:
        return cls.white(shade)

    @classmethod
    def any_but(cls, *args: Color) -> Color:
        """Return black, white or dark grey: whichever differs from every given colour."""
        if not 1 <= len(args) <= 2:
            raise TypeError("any_but() takes one or two colours")
        candidate = cls.black()
        if candidate in args:
            candidate = cls.white()
        if len(args) == 2 and candidate in args:
            candidate = cls.dark_gray()
        return candidate

    @classmethod
    def hsb(cls, hue: float, saturation: float, brightness: float) -> Color:
        """Build a colour from hue (degrees), saturation and brightness (0..1)."""
        sector = int(math.fmod(int(hue / 60.0), 6))
        f = hue / 60.0 - int(hue / 60.0)
        p = int(255 * brightness * (1 - saturation))
        q = int(255 * brightness * (1 - f * saturation))
        t = int(255 * brightness * (1 - (1 - f) * saturation))
        v = int(brightness * 255)
        table = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }
        if sector not in table:
            return cls.black()
        return cls(*table[sector])