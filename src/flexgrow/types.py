"""
A single source of truth for types that are used in the other modules.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum as _Enum
from typing import Literal, TypeVar, Union


class BugError(AssertionError):
    """A type of error that should never occur. If it occurs, something needs to be fixed. Please report any BugErrors found."""


# Aliases
##########################################################################

Number = int, float  # for isinstance(x, Number)

C_T = TypeVar("C_T")  # the content of a Child
V_T = TypeVar("V_T")


class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


################## Sentinels ###################
class Sentinel(Enum):
    Required = "required"


# Type Aliases
RequiredType = Literal[Sentinel.Required]

Required: RequiredType = Sentinel.Required

#################################################


@dataclass(frozen=True)
class Optional:
    """
    A child that is only seated if there is space left for it.
    Bigger priorities are seated first.
    """

    priority: int = 0


Optionality = Union[RequiredType, Optional]
