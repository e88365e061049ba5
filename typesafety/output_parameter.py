"""Output parameters: explicit, write-only destinations for a function's results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO

_UNSET = object()


class Deferred:
    """Storage for a value that is created later and never emptied again."""

    __slots__ = ("_value",)

    def __init__(self):
        self._value = _UNSET

    def has_value(self) -> bool:
        return self._value is not _UNSET

    def emplace(self, value):
        """Store ``value`` and return it."""
        self._value = value
        return value

    def value(self):
        """The stored value; raises ValueError if none was stored yet."""
        if self._value is _UNSET:
            raise ValueError("deferred value has not been constructed")
        return self._value

    def __repr__(self):
        if self.has_value():
            return f"Deferred({self._value!r})"
        return "Deferred()"


@dataclass
class Box:
    """A mutable holder for a single value."""

    value: Any


class OutputParameter:
    """A write-only handle to a :class:`Box` or :class:`Deferred` destination.

    ``factory`` builds the value from the arguments given to :meth:`assign`;
    without one, :meth:`assign` takes exactly one value and stores it as is.
    """

    __slots__ = ("_target", "_factory")

    def __init__(self, target, factory: Optional[Callable[..., Any]] = None):
        if not isinstance(target, (Box, Deferred)):
            raise TypeError(
                f"output target must be a Box or Deferred, not {type(target).__name__}"
            )
        self._target = target
        self._factory = factory

    def assign(self, *args):
        """Build a value from ``args``, store it in the target and return it."""
        if self._factory is not None:
            value = self._factory(*args)
        elif len(args) == 1:
            value = args[0]
        else:
            raise TypeError(
                f"assign() without a factory takes exactly one value, got {len(args)}"
            )
        if isinstance(self._target, Box):
            self._target.value = value
        else:
            self._target.emplace(value)
        return value


def out(target, factory: Optional[Callable[..., Any]] = None) -> OutputParameter:
    """Create an :class:`OutputParameter` writing to ``target``."""
    return OutputParameter(target, factory)


def read_concatenated(stream: TextIO, output: OutputParameter) -> bool:
    """Concatenate all whitespace-separated words of ``stream`` into ``output``.

    Returns whether any text was read.
    """
    result = "".join(word for line in stream for word in line.split())
    return bool(output.assign(result))