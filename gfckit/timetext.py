"""Formatting of game time as on-screen clock text."""

from __future__ import annotations


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _field(n: int) -> str:
    return str(n).rjust(2, "0")


def timetext(t: int) -> str:
    """Format milliseconds as ``MM:SS.cc``; minutes wrap at 100."""
    t = int(t)
    minutes = _trunc_mod(_trunc_div(t, 60000), 100)
    seconds = _trunc_mod(_trunc_div(t, 1000), 60)
    centis = _trunc_mod(_trunc_div(t, 10), 100)
    return f"{_field(minutes)}:{_field(seconds)}.{_field(centis)}"