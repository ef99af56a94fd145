import pytest

from mcutools.byteset import ByteSet


def test_add_contains_len():
    s = ByteSet()
    s.add(3)
    s.add(200)
    s.add(3)
    assert 3 in s
    assert 200 in s
    assert 4 not in s
    assert len(s) == 2


def test_discard():
    s = ByteSet([1, 2, 3])
    s.discard(2)
    s.discard(50)
    assert list(s) == [1, 3]


def test_iteration_is_ascending():
    assert list(ByteSet([200, 5, 1, 255, 0])) == [0, 1, 5, 200, 255]


def test_invert_all_and_one():
    s = ByteSet()
    s.invert()
    assert len(s) == 256
    s.invert(10)
    assert 10 not in s
    s.invert(10)
    assert 10 in s
    s.invert()
    assert len(s) == 0


def test_clear_and_copy():
    s = ByteSet([7, 8])
    c = s.copy()
    s.clear()
    assert len(s) == 0
    assert list(c) == [7, 8]


def test_set_operators():
    a = ByteSet([1, 2, 3])
    b = ByteSet([3, 4])
    assert list(a | b) == [1, 2, 3, 4]
    assert list(a - b) == [1, 2]
    assert list(a & b) == [3]
    assert list(a) == [1, 2, 3]


def test_in_place_operators():
    a = ByteSet([1, 2, 3])
    a |= ByteSet([9])
    assert list(a) == [1, 2, 3, 9]
    a -= ByteSet([2])
    assert list(a) == [1, 3, 9]
    a &= ByteSet([3, 9, 10])
    assert list(a) == [3, 9]


def test_equality_and_subset():
    a = ByteSet([1, 2])
    assert a == ByteSet([2, 1])
    assert a != ByteSet([1])
    assert ByteSet([1]) <= a
    assert a <= a
    assert not (a <= ByteSet([1]))


def test_cursor_forward_and_backward():
    s = ByteSet([4, 17, 255])
    assert s.first() == 4
    assert s.next() == 17
    assert s.next() == 255
    assert s.next() is None
    assert s.next() is None
    assert s.last() == 255
    assert s.prev() == 17
    assert s.prev() == 4
    assert s.prev() is None


def test_cursor_on_empty_set():
    s = ByteSet()
    assert s.first() is None
    assert s.last() is None
    assert s.next() is None


def test_cursor_at_zero():
    s = ByteSet([0])
    assert s.last() == 0
    assert s.prev() is None


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_out_of_range(bad):
    with pytest.raises(ValueError):
        ByteSet().add(bad)
    assert bad not in ByteSet([0, 255])


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        ByteSet().add(1.5)