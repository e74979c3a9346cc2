import flexgrow.utils as util


def test_func():
    assert util.make_default(None, 0) == 0
    assert util.make_default(3, 0) == 3
    # only None is replaced
    assert util.make_default(0, 5) == 0

    assert util.not_neg(-1) == 0
    assert util.not_neg(2) == 2

    evens, odds = util.group_by_bool(range(6), lambda x: x % 2 == 0)
    assert evens == [0, 2, 4]
    assert odds == [1, 3, 5]
