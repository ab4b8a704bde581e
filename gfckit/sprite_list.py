"""A list of sprites with bulk operations."""

from __future__ import annotations

from typing import Any, Callable


def deleted(item: Any) -> bool:
    """True if the item is marked as deleted."""
    flag = item.is_deleted
    return bool(flag() if callable(flag) else flag)


class SpriteList(list):
    """A list with in-place removal and method broadcasting."""

    def delete_if(self, predicate: Callable[[Any], bool]) -> None:
        """Remove, in place, every element for which the predicate is true."""
        self[:] = [item for item in self if not predicate(item)]

    def for_each(self, method: Callable[..., Any] | str, *args: Any) -> None:
        """Call a method on every element, in order, passing the extra arguments.

        ``method`` is either an unbound method (``Sprite.update``) or a
        method name.
        """
        for item in self:
            if isinstance(method, str):
                getattr(item, method)(*args)
            else:
                method(item, *args)

    def delete_all(self) -> None:
        """Remove every element."""
        self.clear()