"""A lightweight, rebindable reference to a callable."""

from __future__ import annotations

from typing import Any, Callable


class FunctionRef:
    """Refers to a callable and forwards calls to it.

    Created from another :class:`FunctionRef`, it refers to the same callable.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[..., Any]):
        self._func = self._target(func)

    @staticmethod
    def _target(func):
        if isinstance(func, FunctionRef):
            return func._func
        if func is None:
            raise TypeError("function must not be None")
        if not callable(func):
            raise TypeError(f"{type(func).__name__} object is not callable")
        return func

    def assign(self, func: Callable[..., Any]) -> None:
        """Rebind the reference to ``func``."""
        self._func = self._target(func)

    def __call__(self, *args):
        return self._func(*args)

    def __repr__(self):
        return f"FunctionRef({self._func!r})"