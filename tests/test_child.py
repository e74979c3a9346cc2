from pytest import raises

from flexgrow import Child, ChildConstraints, InvalidConstraint, Optional, Required


def test_defaults():
    child = Child("a")
    c = child.constraints
    assert c == ChildConstraints(0, None, Required, 1.0)
    assert child.content == "a"
    assert child.size is None
    assert not child.is_seated
    assert not child.is_optional
    assert child.priority is None


def test_setters():
    child = Child("a")
    assert child.with_min(3) is child
    assert child.with_max(9) is child
    assert child.with_grow(2.5) is child
    assert child.constraints == ChildConstraints(3, 9, Required, 2.5)

    assert Child("b").clamp(1, 4).constraints.max == 4
    fixed = Child("c").with_size(8).constraints
    assert fixed.min == fixed.max == 8


def test_optionality():
    child = Child("a").optional()
    assert child.is_optional
    assert child.priority == 0
    assert child.constraints.optionality == Optional(0)

    child.optional_with_priority(7)
    assert child.priority == 7

    child.required()
    assert not child.is_optional
    assert child.constraints.optionality is Required


def test_constraints_are_a_copy():
    child = Child("a").with_min(3)
    c = child.constraints
    c.min = 100
    assert child.constraints.min == 3


def test_capacity():
    assert ChildConstraints(2, 5).capacity(3, 40) == 2
    assert ChildConstraints(2).capacity(3, 40) == 40


def test_any_content():
    key = ("name", 3)
    child = Child(key)
    assert child.content is key
    assert repr(child) == "Child(('name', 3), size=None)"


def test_validate():
    Child("ok").clamp(3, 3).optional_with_priority(2).constraints.validate()
    # setters can come in any order
    Child("ok").with_max(10).with_min(5).constraints.validate()
    for child in [
        Child("a").with_min(-1),
        Child("b").clamp(4, 3),
        Child("c").with_grow(-0.5),
        Child("d").with_grow(float("inf")),
        Child("e").optional_with_priority(-1),
        Child("f").with_min(2.5),
    ]:
        with raises(InvalidConstraint):
            child.constraints.validate()
