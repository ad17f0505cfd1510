from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Tuple, TypeVar

from loguru import logger

T = TypeVar("T")
U = TypeVar("U")

ZeroFactory = Optional[Callable[[], T]]


def _zero_of(zero: ZeroFactory) -> T:
    return zero() if zero is not None else None


@dataclass
class Value(Generic[T]):
    """
    Optional value of type T: either present (some) or absent (none).

    When absent, ``value`` holds the zero value produced by ``zero``
    (or None without a factory) and must be ignored.
    """

    value: T
    valid: bool
    zero: ZeroFactory = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # An absent container always holds the zero value, whatever was passed in.
        if not self.valid:
            self.value = _zero_of(self.zero)

    def unwrap(self) -> Tuple[T, bool]:
        """Return the inner value and True if present, the zero value and False otherwise."""
        return self.value, self.valid

    def is_some(self) -> bool:
        return self.valid

    def is_none(self) -> bool:
        return not self.is_some()

    def __bool__(self) -> bool:
        return self.is_some()

    def map(self, f: Callable[[T], U], zero: ZeroFactory = None) -> Value[U]:
        """
        Apply f to the inner value if present.

        ``zero`` is the zero factory of U. The receiver's factory is not carried
        over, since U may differ from T; pass it again when mapping T to T.
        """
        if self.is_some():
            return some(f(self.value), zero)
        return none(zero)

    def or_(self, other: Value[T]) -> Value[T]:
        if self.is_some():
            return dataclasses.replace(self)
        return dataclasses.replace(other)

    def or_some(self, value: T) -> T:
        if self.is_some():
            return self.value
        return value

    def or_zero(self) -> T:
        return self.value

    def or_else(self, fallback: Callable[[], Value[T]]) -> Value[T]:
        """
        Return some(value) if present, otherwise call ``fallback`` and return its result.

        ``fallback`` is called only when the value is absent.
        """
        if self.is_some():
            return some(self.value, self.zero)
        return fallback()

    def to_nullable(self) -> Optional[T]:
        if self.is_some():
            return self.value
        return None

    def reset(self) -> None:
        logger.trace("reset optional value (was {})", self)
        self.value = _zero_of(self.zero)
        self.valid = False

    def take(self) -> Value[T]:
        """Return a copy of the current state and reset to none."""
        result = dataclasses.replace(self)
        self.reset()
        return result

    def replace(self, value: T) -> Value[T]:
        """Return a copy of the current state and set the inner value to ``value``."""
        result = dataclasses.replace(self)
        logger.trace("replace optional value {} -> {!r}", result, value)
        self.value = value
        self.valid = True
        return result


def new(value: T, valid: bool, zero: ZeroFactory = None) -> Value[T]:
    if valid:
        return some(value, zero)
    return none(zero)


def some(value: T, zero: ZeroFactory = None) -> Value[T]:
    return Value(value, True, zero)


def none(zero: ZeroFactory = None) -> Value[T]:
    return Value(None, False, zero)


def from_nullable(value: Optional[T], zero: ZeroFactory = None) -> Value[T]:
    # None is the absence marker; any other value, falsy or not, is present.
    if value is None:
        return none(zero)
    return some(value, zero)
