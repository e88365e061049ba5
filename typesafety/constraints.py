"""Predicates that check a value against one or two bounds."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any


class ConstrainError(ValueError):
    """Raised when a value does not satisfy a constraint."""

    def __init__(self, value: Any, constraint: Any = None):
        self.value = value
        self.constraint = constraint
        if constraint is None:
            message = f"value {value!r} violates its constraint"
        else:
            message = f"value {value!r} violates constraint {constraint!r}"
        super().__init__(message)


@dataclass(frozen=True)
class Less:
    """Valid if the value is less than ``bound``."""

    bound: Any

    def __call__(self, value) -> bool:
        return value < self.bound


@dataclass(frozen=True)
class LessEqual:
    """Valid if the value is less than or equal to ``bound``."""

    bound: Any

    def __call__(self, value) -> bool:
        return value <= self.bound


@dataclass(frozen=True)
class Greater:
    """Valid if the value is greater than ``bound``."""

    bound: Any

    def __call__(self, value) -> bool:
        return value > self.bound


@dataclass(frozen=True)
class GreaterEqual:
    """Valid if the value is greater than or equal to ``bound``."""

    bound: Any

    def __call__(self, value) -> bool:
        return value >= self.bound


@dataclass(frozen=True)
class Bounded:
    """Valid if the value lies between ``lower`` and ``upper``.

    ``lower_inclusive`` and ``upper_inclusive`` decide whether the bounds
    themselves are valid values.
    """

    lower: Any
    upper: Any
    lower_inclusive: bool
    upper_inclusive: bool

    @property
    def lower_constraint(self):
        """The constraint checking the lower bound."""
        return GreaterEqual(self.lower) if self.lower_inclusive else Greater(self.lower)

    @property
    def upper_constraint(self):
        """The constraint checking the upper bound."""
        return LessEqual(self.upper) if self.upper_inclusive else Less(self.upper)

    @property
    def is_closed(self) -> bool:
        """Whether both bounds are valid values."""
        return self.lower_inclusive and self.upper_inclusive

    def __call__(self, value) -> bool:
        lower_ok = (operator.ge if self.lower_inclusive else operator.gt)(value, self.lower)
        return lower_ok and (operator.le if self.upper_inclusive else operator.lt)(
            value, self.upper
        )


def open_interval(lower, upper) -> Bounded:
    """Values strictly between ``lower`` and ``upper``."""
    return Bounded(lower, upper, False, False)


def closed_interval(lower, upper) -> Bounded:
    """Values between ``lower`` and ``upper``, bounds included."""
    return Bounded(lower, upper, True, True)