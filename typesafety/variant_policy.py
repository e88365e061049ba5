"""Storage for a variant's value and the policies that decide how it changes type.

A policy's :meth:`change_value` is called when the storage already holds a
value of some type and a value of another type is to replace it. The new
value is produced by ``make``, a callable taking no arguments that may raise.
The policies differ in what the storage holds when ``make`` raises.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

_EMPTY = object()


class NullVar:
    """Tag marking the empty state of a variant; there is a single instance."""

    __slots__ = ()
    _instance: Optional["NullVar"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "nullvar"

    def __reduce__(self):
        return (NullVar, ())


nullvar = NullVar()


class TaggedStorage:
    """Holds at most one value together with the type it is stored as."""

    __slots__ = ("_kind", "_value")

    def __init__(self):
        self._kind: Optional[type] = None
        self._value: Any = _EMPTY

    def has_value(self) -> bool:
        """Whether a value is stored."""
        return self._value is not _EMPTY

    @property
    def kind(self) -> Optional[type]:
        """The type of the stored value, or None when empty."""
        return self._kind

    @property
    def value(self) -> Any:
        """The stored value; raises ValueError when empty."""
        if self._value is _EMPTY:
            raise ValueError("storage holds no value")
        return self._value

    def emplace(self, kind: type, value: Any) -> Any:
        """Store ``value`` as type ``kind`` and return it.

        The storage must be empty; raises ValueError otherwise.
        """
        if self.has_value():
            raise ValueError("storage already holds a value; destroy it first")
        if kind is None:
            raise TypeError("a stored value needs a type")
        self._kind = kind
        self._value = value
        return value

    def destroy(self) -> None:
        """Drop the stored value, if any."""
        self._kind = None
        self._value = _EMPTY

    def __repr__(self):
        if not self.has_value():
            return "TaggedStorage()"
        return f"TaggedStorage({self._kind.__name__}: {self._value!r})"


class FallbackPolicy:
    """Never empty: if ``make`` raises, a default ``fallback()`` value is stored."""

    allow_empty = False

    def __init__(self, fallback: Callable[[], Any]):
        if not callable(fallback):
            raise TypeError("fallback must be a type that can be created without arguments")
        self.fallback = fallback

    def change_value(self, storage: TaggedStorage, kind: type, make: Callable[[], Any]) -> None:
        """Replace the stored value by ``make()``; on failure store the fallback and re-raise."""
        storage.destroy()
        try:
            value = make()
        except BaseException:
            storage.emplace(self.fallback, self.fallback())
            raise
        storage.emplace(kind, value)

    def __repr__(self):
        return f"FallbackPolicy({getattr(self.fallback, '__name__', self.fallback)!r})"


class OptionalPolicy:
    """Allows the empty state: if ``make`` raises, the storage is left empty."""

    allow_empty = True

    def change_value(self, storage: TaggedStorage, kind: type, make: Callable[[], Any]) -> None:
        """Drop the stored value, then store ``make()``."""
        storage.destroy()
        storage.emplace(kind, make())

    def __repr__(self):
        return "OptionalPolicy()"


class _NonEmptyPolicy:
    allow_empty = False

    def change_value(self, storage: TaggedStorage, kind: type, make: Callable[[], Any]) -> None:
        """Create the new value first; the old one is only dropped once that succeeded."""
        value = make()
        storage.destroy()
        storage.emplace(kind, value)

    def __repr__(self):
        return f"{type(self).__name__}()"


class RarelyEmptyPolicy(_NonEmptyPolicy):
    """The empty state is not allowed; if ``make`` raises, the old value stays."""

    def change_value(self, storage: TaggedStorage, kind: type, make: Callable[[], Any]) -> None:
        """Replace the stored value by ``make()``, keeping the old value if it raises."""
        super().change_value(storage, kind, make)


class NeverEmptyPolicy(_NonEmptyPolicy):
    """The empty state is never entered; if ``make`` raises, the old value stays."""

    def change_value(self, storage: TaggedStorage, kind: type, make: Callable[[], Any]) -> None:
        """Replace the stored value by ``make()``, keeping the old value if it raises."""
        super().change_value(storage, kind, make)