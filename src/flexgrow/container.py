"""
The Container distributes the available space among its children

Building a container happens in three passes:
1. Required children get their min size in the order they were added.
   If one doesn't fit, the whole build fails with NotEnoughSpace.
2. Optional children get their min size by priority (bigger first) as long as they fit.
   Children that don't fit are excluded.
3. The remaining space is distributed according to the grow factors.
   Whatever is left because of down rounding is given out one by one.
"""

from __future__ import annotations

import logging
import math
from typing import Generic, Iterator, Sequence

import flexgrow.config as config

from .child import Child
from .types import C_T, BugError
from .utils import group_by_bool, make_default, not_neg


class NotEnoughSpace(Exception):
    """
    Raised when a required child can't get its min size (plus its margin)
    """

    def __init__(
        self,
        child: Child | None = None,
        index: int | None = None,
        needed: int | None = None,
        available: int | None = None,
    ):
        self.child = child
        self.index = index
        self.needed = needed
        self.available = available
        msg = "Not enough space"
        if child is not None:
            msg += f" for {child.content!r} at index {index} (needed {needed}, available {available})"
        super().__init__(msg)


def solve(
    children: Sequence[Child], available: int, margin_between: int
) -> list[int | None]:
    """
    Computes the sizes of the children without touching them.
    Raises InvalidConstraint before anything is seated if a child can't be sized at all.
    None means the child is excluded.
    """
    constraints = [child._constraints for child in children]
    for c in constraints:
        c.validate()
    sizes: list[int | None] = [None] * len(children)
    added_children = 0

    def margin() -> int:
        return margin_between if added_children else 0

    # first pass: we only add the required children. If their min size
    # is too big we fail, even if skipping optional children later would have helped
    for i, (child, c) in enumerate(zip(children, constraints)):
        if c.is_optional:
            continue
        needed = c.min + margin()
        if needed > available:
            logging.debug(f"Required {child!r} needs {needed} but only {available} are left")
            raise NotEnoughSpace(child, i, needed, available)
        available -= needed
        added_children += 1
        sizes[i] = c.min
        logging.debug(f"Seated required {child!r} at {c.min}")

    # second pass: we add the optional children until we run out of space, by priority.
    # sorted is stable so equal priorities keep their order
    optional = sorted(
        (i for i, c in enumerate(constraints) if c.is_optional),
        key=lambda i: -constraints[i].priority,  # type: ignore
    )
    for i in optional:
        c = constraints[i]
        needed = c.min + margin()
        if needed > available:
            logging.debug(f"Skipped optional {children[i]!r}, needs {needed} of {available}")
            continue
        available -= needed
        added_children += 1
        sizes[i] = c.min
        logging.debug(f"Seated optional {children[i]!r} at {c.min}")

    # then we distribute the remaining space to the growable children
    grown: dict[int, int] = {i: size for i, size in enumerate(sizes) if size is not None}
    growths = {
        i: constraints[i].grow * constraints[i].capacity(size, available)
        for i, size in grown.items()
    }
    sum_growths = sum(growths.values())
    if sum_growths > 0 and math.isfinite(sum_growths):
        for i, size in grown.items():
            growth = int(growths[i] * (available / sum_growths))
            if (max_ := constraints[i].max) is not None:
                growth = min(growth, max_ - size)
            available -= growth
            grown[i] = size + growth
        logging.debug(f"Grew children to {grown}, {available} left")

    # Due to down rounding, it's probable that there's some available space left
    while available > 0:
        given = 0
        for i, size in grown.items():
            max_ = constraints[i].max
            if max_ is None or size < max_:
                grown[i] = size + 1
                given += 1
                available -= 1
                if available == 0:
                    break
        if not given:
            logging.debug(f"All children are at their max, {available} stay unused")
            break

    return [grown.get(i) for i in range(len(children))]


class ContainerBuilder(Generic[C_T]):
    available: int
    margin_between: int
    children: list[Child[C_T]]

    def __init__(self, available: int, margin_between: int | None = None):
        if not isinstance(available, int) or available < 0:
            raise ValueError(f"available must be a non-negative int, got {available!r}")
        self.available = available
        self.children = []
        self._built = False
        self.with_margin_between(make_default(margin_between, config.g["margin_between"]))

    def with_margin_between(self, margin: int) -> ContainerBuilder[C_T]:
        if not isinstance(margin, int) or margin < 0:
            raise ValueError(f"margin must be a non-negative int, got {margin!r}")
        self.margin_between = margin
        return self

    def with_child(self, child: Child[C_T]) -> ContainerBuilder[C_T]:
        self.add(child)
        return self

    def with_children(self, *children: Child[C_T]) -> ContainerBuilder[C_T]:
        for child in children:
            self.add(child)
        return self

    def add(self, child: Child[C_T]):
        self.children.append(child)

    def build(self) -> Container[C_T]:
        """
        Sizes all children. Raises NotEnoughSpace if a required child doesn't fit,
        in which case no child is changed.
        """
        if self._built:
            raise RuntimeError("A ContainerBuilder can only be built once")
        self._built = True

        sizes = solve(self.children, self.available, self.margin_between)
        for child, size in zip(self.children, sizes):
            child._size = size

        container = Container(list(self.children), self.available, self.margin_between)
        if config.DEBUG:
            container.check()
        return container


class Container(Generic[C_T]):
    """
    The result of a build. Every child has its final size
    """

    children: list[Child[C_T]]
    available: int
    margin_between: int

    def __init__(
        self, children: list[Child[C_T]], available: int, margin_between: int = 0
    ):
        self.children = children
        self.available = available
        self.margin_between = margin_between

    @staticmethod
    def builder_in(available: int) -> ContainerBuilder:
        return ContainerBuilder(available)

    def sizes(self) -> list[int]:
        """
        Return the sizes of the children, in the order they were added,
        with 0 for non-included children
        """
        return [make_default(child.size, 0) for child in self.children]

    def to_children(self) -> list[Child[C_T]]:
        return list(self.children)

    def seated(self) -> list[Child[C_T]]:
        return group_by_bool(self.children, lambda child: child.is_seated)[0]

    def excluded(self) -> list[Child[C_T]]:
        return group_by_bool(self.children, lambda child: child.is_seated)[1]

    @property
    def used(self) -> int:
        """
        The space taken by the seated children and the margins between them
        """
        seated = self.seated()
        return sum(self.sizes()) + not_neg(len(seated) - 1) * self.margin_between

    def check(self):
        """
        Raises a BugError if the sizes break any constraint
        """
        if self.used > self.available:
            raise BugError(f"Used {self.used} of only {self.available}")
        for child in self.children:
            c = child._constraints
            if child.size is None:
                if not c.is_optional:
                    raise BugError(f"Required {child!r} was not seated")
                continue
            if child.size < c.min or (c.max is not None and child.size > c.max):
                raise BugError(f"{child!r} is outside of [{c.min}, {c.max}]")

    def __len__(self):
        return len(self.children)

    def __iter__(self) -> Iterator[Child[C_T]]:
        return iter(self.children)

    def __repr__(self):
        return f"Container({self.sizes()}, available={self.available})"
