"""A tagged union holding at most one value of a fixed list of types."""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from typing import Any, Callable, Optional

from .variant_policy import (
    FallbackPolicy,
    NullVar,
    OptionalPolicy,
    RarelyEmptyPolicy,
    TaggedStorage,
    nullvar,
)


def _resolve(func, kind):
    """The callable to use for a stored value of ``kind``, or None to skip it."""
    if isinstance(func, Mapping):
        return func.get(kind)
    return func


def _check_types(types) -> tuple:
    types = tuple(types)
    if not types:
        raise TypeError("a variant needs at least one type")
    for kind in types:
        if not isinstance(kind, type):
            raise TypeError(f"variant types must be types, not {kind!r}")
        if kind is NullVar:
            raise TypeError("NullVar cannot be stored in a variant")
    if len(set(types)) != len(types):
        raise TypeError("variant types must be distinct")
    return types


class BasicVariant:
    """Stores at most one value of one of ``types``.

    ``policy`` decides whether the variant may be empty and what happens
    when creating a value of a new type raises. The remaining arguments
    give the initial value: nothing or ``nullvar`` for the empty state,
    a single value of one of the types, or a type followed by the
    arguments to create it with.
    """

    __slots__ = ("_types", "_policy", "_storage")
    __hash__ = None

    def __init__(self, types, policy, *args):
        self._types = _check_types(types)
        self._policy = policy
        self._storage = TaggedStorage()
        if not args or (len(args) == 1 and args[0] is nullvar):
            if not policy.allow_empty:
                raise TypeError("this variant cannot be empty; give it an initial value")
            return
        first = args[0]
        if isinstance(first, type) and first in self._types:
            self.emplace(first, *args[1:])
        elif len(args) == 1:
            self.emplace(type(first), first)
        else:
            raise TypeError("expected a single value or a type followed by its arguments")

    def _blank(self) -> "BasicVariant":
        result = object.__new__(type(self))
        result._types = self._types
        result._policy = self._policy
        result._storage = TaggedStorage()
        return result

    @property
    def types(self) -> tuple:
        """The types the variant can store."""
        return self._types

    @property
    def policy(self):
        """The variant policy."""
        return self._policy

    @property
    def allow_empty(self) -> bool:
        """Whether the variant may be put into the empty state explicitly."""
        return bool(self._policy.allow_empty)

    @property
    def kind(self) -> Optional[type]:
        """The type of the stored value, or None when empty."""
        return self._storage.kind

    @property
    def type_id(self) -> int:
        """0 when empty, otherwise the position of the stored type counted from 1."""
        return self._id_of(self._storage.kind)

    def _id_of(self, kind) -> int:
        if kind in self._types:
            return self._types.index(kind) + 1
        return 0

    def _check_kind(self, kind) -> None:
        if kind not in self._types:
            raise TypeError(f"{getattr(kind, '__name__', kind)!r} is not a type of this variant")

    def has_value(self, kind=None) -> bool:
        """Whether a value is stored; with ``kind``, whether one of that type is stored.

        ``has_value(NullVar)`` is true when the variant is empty.
        """
        if kind is None:
            return self._storage.has_value()
        if kind is NullVar:
            return not self._storage.has_value()
        return self._storage.has_value() and self._storage.kind is kind

    def __bool__(self) -> bool:
        return self._storage.has_value()

    def value(self, kind):
        """The stored value of type ``kind``.

        Raises TypeError if ``kind`` is not a type of the variant and
        ValueError if the variant does not hold a value of that type.
        ``value(NullVar)`` returns ``nullvar`` for an empty variant.
        """
        if kind is NullVar:
            if self._storage.has_value():
                raise ValueError("variant is not empty")
            return nullvar
        self._check_kind(kind)
        if self._storage.kind is not kind:
            raise ValueError(f"variant does not hold a value of type {kind.__name__}")
        return self._storage.value

    def optional_value(self, kind):
        """The stored value of type ``kind``, or None if it holds something else."""
        if kind is NullVar:
            return None if self._storage.has_value() else nullvar
        return self._storage.value if self.has_value(kind) else None

    def value_or(self, kind, default):
        """The stored value of type ``kind``, else ``default`` converted to ``kind``."""
        if self.has_value(kind):
            return self._storage.value
        if isinstance(default, kind):
            return default
        return kind(default)

    def emplace(self, kind, *args):
        """Replace the stored value by one of type ``kind`` and return it.

        A single argument of exactly type ``kind`` is stored as is; otherwise
        the value is ``kind(*args)``. If the variant already holds a value of
        another type, or has to create one, the policy decides what remains
        when creation raises.
        """
        self._check_kind(kind)
        direct = len(args) == 1 and type(args[0]) is kind
        if direct and self._storage.kind is kind:
            self._storage.destroy()
            return self._storage.emplace(kind, args[0])

        def make():
            return args[0] if direct else kind(*args)

        if self._storage.has_value():
            self._policy.change_value(self._storage, kind, make)
        else:
            self._storage.emplace(kind, make())
        return self._storage.value

    def reset(self) -> None:
        """Make the variant empty; only allowed if the policy permits it."""
        if not self._policy.allow_empty:
            raise TypeError("this variant cannot be made empty")
        self._storage.destroy()

    def map(self, func, *args) -> "BasicVariant":
        """A new variant holding ``func(value, *args)``.

        ``func`` is a callable or a mapping from stored type to callable;
        when the mapping has no entry for the stored type, the result is a
        copy. An empty variant maps to an empty variant.
        """
        result = self._blank()
        if not self._storage.has_value():
            return result
        kind = self._storage.kind
        handler = _resolve(func, kind)
        if handler is None:
            result._storage.emplace(kind, self._storage.value)
            return result
        mapped = handler(self._storage.value, *args)
        new_kind = type(mapped)
        if new_kind not in self._types:
            raise TypeError(f"result of type {new_kind.__name__} cannot be stored in the variant")
        result._storage.emplace(new_kind, mapped)
        return result

    def _take(self):
        if not self._storage.has_value():
            return None
        content = (self._storage.kind, self._storage.value)
        self._storage.destroy()
        return content

    def swap(self, other: "BasicVariant") -> None:
        """Exchange the contents of two variants of the same types."""
        if not isinstance(other, BasicVariant) or other._types != self._types:
            raise TypeError("can only swap variants of the same types")
        mine, theirs = self._take(), other._take()
        if theirs is not None:
            self._storage.emplace(*theirs)
        if mine is not None:
            other._storage.emplace(*mine)

    def _operand(self, other):
        """``other`` as a (type id, value) pair, or None if it cannot be compared."""
        if isinstance(other, BasicVariant):
            if other._types != self._types:
                return None
            return other.type_id, (other._storage.value if other else None)
        if other is nullvar:
            return 0, None
        return self._id_of(type(other)), other

    def _self_operand(self):
        return self.type_id, (self._storage.value if self else None)

    @staticmethod
    def _less(a, b) -> bool:
        if a[0] != b[0]:
            return a[0] < b[0]
        if a[0] == 0:
            return False
        return a[1] < b[1]

    def __eq__(self, other):
        if isinstance(other, BasicVariant):
            if other._types != self._types:
                return NotImplemented
            if self._storage.kind is not other._storage.kind:
                return False
            return not self or self._storage.value == other._storage.value
        if other is nullvar:
            return not self._storage.has_value()
        return self.has_value(type(other)) and self._storage.value == other

    def __lt__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._less(self._self_operand(), operand)

    def __le__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return not self._less(operand, self._self_operand())

    def __gt__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._less(operand, self._self_operand())

    def __ge__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return not self._less(self._self_operand(), operand)

    def __repr__(self):
        names = ", ".join(t.__name__ for t in self._types)
        if not self:
            return f"BasicVariant[{names}](nullvar)"
        return f"BasicVariant[{names}]({self._storage.value!r})"


def variant(*args) -> Callable[..., BasicVariant]:
    """A constructor of variants over the given types with the default policy.

    If the first type is ``NullVar`` the variant may be empty and uses
    :class:`OptionalPolicy`; otherwise it uses :class:`RarelyEmptyPolicy`.
    """
    if args and args[0] is NullVar:
        return partial(BasicVariant, _check_types(args[1:]), OptionalPolicy())
    return partial(BasicVariant, _check_types(args), RarelyEmptyPolicy())


def fallback_variant(fallback, *args) -> Callable[..., BasicVariant]:
    """A constructor of never-empty variants that fall back to ``fallback()``."""
    types = _check_types((fallback, *args))
    return partial(BasicVariant, types, FallbackPolicy(fallback))


def with_variant(var: BasicVariant, func: Any, *args) -> None:
    """Call ``func(value, *args)`` with the stored value, if any.

    ``func`` may be a mapping from type to callable; types without an entry
    are skipped.
    """
    if not var:
        return
    handler = _resolve(func, var.kind)
    if handler is not None:
        handler(var.value(var.kind), *args)