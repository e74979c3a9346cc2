"""
Tiny utility computing the allocation of a size among "children".

Typical use case: decide what columns to show in an UI, and what size to give to each column.

Each child can have a min and max size, be optional with a priority, have a `grow` factor.

```python
from flexgrow import Child, Container

container = (
    Container.builder_in(50)
    .with_margin_between(1)
    .with_child(Child("name").clamp(5, 10))
    .with_child(Child("price").with_size(8).optional_with_priority(7))
    .with_child(Child("quantity").with_size(8).optional())
    .with_child(Child("total").with_size(8))
    .with_child(Child("comments").with_min(10).with_grow(2.0))
    .with_child(Child("vendor").with_size(60).optional_with_priority(9))
    .build()
)
assert container.sizes() == [7, 8, 8, 8, 15, 0]
```

You can give anything to `Child`, it's stored in the child and returned by `child.content`.
"""
import flexgrow.config

from .child import Child, ChildConstraints, InvalidConstraint
from .config import reset_config, set_config
from .container import Container, ContainerBuilder, NotEnoughSpace, solve
from .types import Optional, Optionality, Required

__all__ = [
    # children
    "Child",
    "ChildConstraints",
    "Optional",
    "Optionality",
    "Required",
    # containers
    "Container",
    "ContainerBuilder",
    "solve",
    # errors
    "NotEnoughSpace",
    "InvalidConstraint",
    # config
    "set_config",
    "reset_config",
]
