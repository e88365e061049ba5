"""A rebindable, non-null reference to a single object."""

from __future__ import annotations

import copy as _copy
from typing import Any, Callable


class ObjectRef:
    """Refers to exactly one object; equality means referring to the same object."""

    __slots__ = ("_obj",)

    def __init__(self, obj):
        if obj is None:
            raise TypeError("an object reference must refer to an object")
        self._obj = obj

    def get(self):
        """The referenced object."""
        return self._obj

    def map(self, func: Callable[..., Any], *args) -> "ObjectRef":
        """Call ``func(obj, *args)`` and return a reference to its result.

        If the function returns an :class:`ObjectRef`, the result refers to
        the same object.
        """
        result = func(self._obj, *args)
        if isinstance(result, ObjectRef):
            return ObjectRef(result.get())
        return ObjectRef(result)

    def __eq__(self, other):
        if isinstance(other, ObjectRef):
            return self._obj is other._obj
        return self._obj is other

    def __hash__(self):
        return hash(id(self._obj))

    def __repr__(self):
        return f"ObjectRef({self._obj!r})"


def ref(obj) -> ObjectRef:
    """Create a reference to ``obj``."""
    return ObjectRef(obj)


def copy_of(reference: ObjectRef):
    """A shallow copy of the referenced object."""
    return _copy.copy(reference.get())


def with_ref(reference: ObjectRef, func: Callable[..., Any], *args) -> None:
    """Call ``func`` with the referenced object followed by ``args``."""
    func(reference.get(), *args)