from typing import Callable, Iterable

from flexgrow.types import V_T


########################## Misc #########################
def make_default(value: V_T | None, default: V_T) -> V_T:
    """
    If the `value` is None this returns `default` else it returns `value`

    `make_default(margin, 0)`
    """
    return default if value is None else value


def not_neg(x: float):
    """
    return the maximum of x and 0
    """
    return max(0, x)


def group_by_bool(
    l: Iterable[V_T], key: Callable[[V_T], bool]
) -> tuple[list[V_T], list[V_T]]:
    """
    Group a list into two lists depending on the bool value given by the key
    """
    true = []
    false = []
    for x in l:
        if key(x):
            true.append(x)
        else:
            false.append(x)
    return true, false


__all__ = ["make_default", "not_neg", "group_by_bool"]
