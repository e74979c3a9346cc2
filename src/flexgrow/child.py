"""
The Child class and the constraints a Child can be given

A Child is built with chained calls, every setter returns the Child itself:

```python
Child("comments").with_min(10).with_grow(2.0)
Child("vendor").with_size(60).optional_with_priority(9)
```
"""

from __future__ import annotations

import math
from copy import copy
from dataclasses import dataclass, field
from typing import Generic

import flexgrow.config as config

from .types import C_T, Number, Optional, Optionality, Required
from .utils import make_default


class InvalidConstraint(ValueError):
    pass


@dataclass
class ChildConstraints:
    min: int = 0
    max: int | None = None
    optionality: Optionality = Required
    grow: float = field(default_factory=lambda: config.g["grow"])

    @property
    def is_optional(self) -> bool:
        return isinstance(self.optionality, Optional)

    @property
    def priority(self) -> int | None:
        """
        The priority of an optional child. None for required children
        """
        return self.optionality.priority if self.is_optional else None  # type: ignore

    def capacity(self, size: int, available: int) -> int:
        """
        How much a child of the given size could still grow.
        Without a max this is everything that is available.
        """
        return available if self.max is None else self.max - size

    def validate(self):
        """
        Raises an InvalidConstraint if the constraints can't be satisfied by any size
        """
        if not isinstance(self.min, int) or self.min < 0:
            raise InvalidConstraint(f"min must be a non-negative int, got {self.min!r}")
        if self.max is not None:
            if not isinstance(self.max, int):
                raise InvalidConstraint(f"max must be an int or None, got {self.max!r}")
            if self.max < self.min:
                raise InvalidConstraint(
                    f"max ({self.max}) must not be smaller than min ({self.min})"
                )
        if (
            not isinstance(self.grow, Number)
            or not math.isfinite(self.grow)
            or self.grow < 0
        ):
            raise InvalidConstraint(f"grow must be a non-negative number, got {self.grow!r}")
        if self.is_optional and self.priority < 0:  # type: ignore
            raise InvalidConstraint(f"priority must be non-negative, got {self.priority}")


class Child(Generic[C_T]):
    """
    A Child is something that wants some space in a Container.
    The content can be anything, it is never looked at.
    """

    _content: C_T
    _constraints: ChildConstraints
    _size: int | None  # None if not (yet) included

    def __init__(self, content: C_T):
        self._content = content
        self._constraints = ChildConstraints()
        self._size = None

    @property
    def content(self) -> C_T:
        return self._content

    @property
    def constraints(self) -> ChildConstraints:
        return copy(self._constraints)

    @property
    def size(self) -> int | None:
        """
        Return the size, if the child is included in the container, or None
        if there wasn't enough space to include it
        """
        return self._size

    @property
    def is_seated(self) -> bool:
        return self._size is not None

    @property
    def is_optional(self) -> bool:
        return self._constraints.is_optional

    @property
    def priority(self) -> int | None:
        return self._constraints.priority

    # setters
    def optional(self) -> Child[C_T]:
        return self.optional_with_priority(config.g["priority"])

    def optional_with_priority(self, priority: int) -> Child[C_T]:
        self._constraints.optionality = Optional(priority)
        return self

    def required(self) -> Child[C_T]:
        self._constraints.optionality = Required
        return self

    def with_min(self, min: int) -> Child[C_T]:
        self._constraints.min = min
        return self

    def with_max(self, max: int | None) -> Child[C_T]:
        self._constraints.max = max
        return self

    def clamp(self, min: int, max: int) -> Child[C_T]:
        self._constraints.min = min
        self._constraints.max = max
        return self

    def with_size(self, size: int) -> Child[C_T]:
        """
        A fixed size. Same as `clamp(size, size)`
        """
        return self.clamp(size, size)

    def with_grow(self, grow: float | None) -> Child[C_T]:
        self._constraints.grow = make_default(grow, config.g["grow"])
        return self

    def __repr__(self):
        return f"Child({self._content!r}, size={self._size})"
