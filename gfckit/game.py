"""Game state: mode, level, timing and life-cycle hooks."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Any, Callable

from .vector import Vector

_UINT32 = 0xFFFFFFFF


class GameMode(Enum):
    MENU = "menu"
    GAME = "game"
    GAMEOVER = "gameover"
    NONE = "none"


class Game:
    """Base class for a game; override the ``on_*`` hooks.

    Mode and level changes are only requests: they are recorded in
    ``requested_mode`` and ``requested_level`` and take effect when the
    application loop handles them.

    Besides overriding, callables may be attached to a hook with
    :meth:`connect`; the default hook implementations call them in order.
    """

    def __init__(self) -> None:
        self.app: Any = None
        self._width = 0
        self._height = 0
        self.running = True
        self.paused = False
        self.mode = GameMode.MENU
        self.requested_mode = GameMode.NONE
        self.level = 0
        self.requested_level: int | None = None
        self.time = 0
        self.time_prev = 0
        self.time_game_over = 0
        self._handlers: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    # Hook listeners

    def connect(self, hook: str, handler: Callable[..., Any]) -> None:
        """Attach ``handler`` to the hook named ``hook`` (e.g. ``"on_update"``)."""
        if not (hook.startswith("on_") and callable(getattr(self, hook, None))):
            raise ValueError(f"unknown hook: {hook!r}")
        self._handlers[hook].append(handler)

    def _notify(self, hook: str, *args: Any) -> None:
        for handler in self._handlers.get(hook, ()):
            handler(*args)

    # Geometry

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Vector:
        return Vector(self._width, self._height)

    def set_size(self, width: int, height: int) -> None:
        self._width, self._height = int(width), int(height)

    # Timing

    @property
    def delta_time(self) -> int:
        """Milliseconds since the previous update, as an unsigned 32-bit value."""
        return (self.time - self.time_prev) & _UINT32

    def reset_time(self, t: int = 0) -> None:
        self.time = self.time_prev = int(t) & _UINT32

    def set_time(self, t: int) -> None:
        self.time = int(t) & _UINT32

    def catch_delta_time(self) -> None:
        self.time_prev = self.time

    def set_time_game_over(self, t: int) -> None:
        self.time_game_over = int(t) & _UINT32

    # State

    @property
    def is_menu_mode(self) -> bool:
        return self.mode is GameMode.MENU

    @property
    def is_game_mode(self) -> bool:
        return self.mode is GameMode.GAME

    @property
    def is_game_over_mode(self) -> bool:
        return self.mode is GameMode.GAMEOVER

    is_game_over = is_game_over_mode

    @property
    def is_mode_changing(self) -> bool:
        return self.requested_mode is not GameMode.NONE

    def change_mode(self, mode: GameMode) -> None:
        """Request a mode change for the next loop iteration."""
        self.requested_mode = GameMode(mode)

    def start_game(self) -> None:
        self.change_mode(GameMode.GAME)

    def game_over(self) -> None:
        self.change_mode(GameMode.GAMEOVER)

    def new_game(self) -> None:
        self.change_mode(GameMode.MENU)

    def stop_game(self) -> None:
        self.running = False

    stop_app = stop_game

    def pause_game(self, paused: bool | None = None) -> None:
        """Set the paused flag, or toggle it when no value is given."""
        self.paused = (not self.paused) if paused is None else bool(paused)

    # Level

    def set_level(self, level: int) -> None:
        self.requested_level = int(level)

    def new_level(self) -> None:
        self.set_level(self.level + 1)

    # Life cycle

    def on_initialize(self) -> None:
        self._notify("on_initialize")

    def on_display_menu(self) -> None:
        self._notify("on_display_menu")

    def on_start_game(self) -> None:
        self._notify("on_start_game")

    def on_start_level(self, level: int) -> None:
        self._notify("on_start_level", level)

    def on_game_over(self) -> None:
        self._notify("on_game_over")

    def on_update(self) -> None:
        self._notify("on_update")

    def on_draw(self, graphics: Any) -> None:
        self._notify("on_draw", graphics)

    def on_terminate(self) -> None:
        self._notify("on_terminate")