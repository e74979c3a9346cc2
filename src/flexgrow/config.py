""" Any global variables are stored here"""
from typing import Any

from frozendict import frozendict

# fmt: off
defaults: frozendict = frozendict({
    "grow": 1.0,                    # float, the growth weight of a new Child
    "priority": 0,                  # int, the priority used by Child.optional()
    "margin_between": 0,            # int, the margin of a new ContainerBuilder
})

g: dict[str, Any] = dict(defaults)

DEBUG = True                        # check the result of every build
# fmt: on


def set_config(
    *,
    grow: float | None = None,
    priority: int | None = None,
    margin_between: int | None = None,
    **kwargs,
):
    """
    Sets the user settable defaults. Values that are None are ignored.
    """
    kwargs.update(grow=grow, priority=priority, margin_between=margin_between)
    g.update({k: v for k, v in kwargs.items() if k in g and v is not None})


def reset_config():
    """
    Restores the factory defaults
    """
    g.clear()
    g.update(defaults)
