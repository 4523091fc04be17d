import pytest

from collectkit.slist import SList


class Box:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Box) and other.value == self.value

    __hash__ = None


def test_reverse_reorders_elements():
    items = [5, 12, 848, 23]
    lst = SList(items)
    lst.reverse()
    assert lst.to_list() == list(reversed(items))
    assert lst.get_first() == items[-1]
    assert lst.get_last() == items[0]


def test_reverse_keeps_tail_usable():
    lst = SList(["a", "b", "c"])
    lst.reverse()
    lst.add_last("z")
    assert lst.to_list() == ["c", "b", "a", "z"]
    assert len(lst) == 4


@pytest.mark.parametrize("items", [[], ["only"]])
def test_reverse_short_lists_unchanged(items):
    lst = SList(items)
    lst.reverse()
    assert lst.to_list() == items


def test_sublist_inclusive_range():
    lst = SList([5, 6, 7, 8, 9])
    sub = lst.sublist(1, 3)
    assert sub.to_list() == [6, 7, 8]
    assert len(sub) == 3
    assert isinstance(sub, SList)
    assert lst.to_list() == [5, 6, 7, 8, 9]


def test_sublist_single_element():
    lst = SList(["a", "b", "c"])
    assert lst.sublist(2, 2).to_list() == ["c"]


@pytest.mark.parametrize("start,end", [(3, 1), (0, 5), (2, 3), (-1, 1)])
def test_sublist_invalid_range(start, end):
    lst = SList(["a", "b", "c"])
    with pytest.raises(ValueError):
        lst.sublist(start, end)


def test_copy_shallow_shares_references():
    boxes = [Box(1), Box(2), Box(3)]
    lst = SList(boxes)
    copy = lst.copy_shallow()
    assert len(copy) == len(lst)
    assert all(a is b for a, b in zip(copy, lst))
    copy.add_last(Box(4))
    assert len(lst) == 3


def test_copy_deep_uses_copier():
    boxes = [Box(1), Box(2), Box(3)]
    lst = SList(boxes)
    copy = lst.copy_deep(lambda b: Box(b.value))
    assert copy.to_list() == boxes
    assert all(a is not b for a, b in zip(copy, lst))


def test_contains_counts_identity():
    a, b, c, d = Box(5), Box(12), Box(848), Box(23)
    lst = SList([a, b, c, c])
    assert lst.contains(c) == 2
    assert lst.contains(a) == 1
    assert lst.contains(d) == 0
    assert lst.contains(Box(5)) == 0


def test_contains_value_with_cmp():
    lst = SList([Box(1), Box(2), Box(1)])
    count = lst.contains_value(Box(1), lambda x, y: x.value - y.value)
    assert count == 2


def test_contains_value_default_equality():
    lst = SList([Box(1), Box(2), Box(1)])
    assert lst.contains_value(Box(2)) == 1
    assert lst.contains_value(Box(9)) == 0


def test_index_of():
    a, b, c = Box(1), Box(2), Box(3)
    lst = SList([a, b, c])
    assert lst.index_of(a) == 0
    assert lst.index_of(c) == 2


def test_index_of_missing_raises():
    lst = SList([Box(1)])
    with pytest.raises(ValueError):
        lst.index_of(Box(1))


def test_to_list_round_trip():
    items = ["x", "y", "z"]
    assert SList(items).to_list() == items
    assert SList().to_list() == []


def test_sort_ascending():
    items = [848, 5, 23, 12, 5, 99]
    lst = SList(items)
    lst.sort()
    assert lst.to_list() == sorted(items)
    assert lst.get_last() == max(items)


def test_sort_with_key():
    boxes = [Box(3), Box(1), Box(2)]
    lst = SList(boxes)
    lst.sort(key=lambda b: b.value)
    values = [b.value for b in lst]
    assert values == sorted(values)
    assert len(lst) == 3


def test_foreach_visits_in_order():
    items = ["a", "b", "c"]
    seen = []
    SList(items).foreach(seen.append)
    assert seen == items


def test_filter_returns_new_list():
    items = [i % 2 for i in range(20)]
    lst = SList(items)
    evens = lst.filter(lambda e: e == 0)
    assert len(evens) == 10
    assert all(e == 0 for e in evens)
    assert lst.to_list() == items


def test_filter_empty_raises():
    with pytest.raises(IndexError):
        SList().filter(lambda e: True)


def test_filter_mut_keeps_matching():
    lst = SList([1, 2, 3, 4, 5, 6])
    lst.filter_mut(lambda e: e > 3)
    assert lst.to_list() == [4, 5, 6]
    assert lst.get_first() == 4


def test_filter_mut_removing_tail_keeps_tail_correct():
    lst = SList([1, 2, 3, 4, 5, 6])
    lst.filter_mut(lambda e: e <= 3)
    assert lst.get_last() == 3
    lst.add_last(7)
    assert lst.to_list() == [1, 2, 3, 7]


def test_filter_mut_remove_everything():
    lst = SList([1, 2, 3])
    lst.filter_mut(lambda e: False)
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.get_first()


def test_filter_mut_empty_raises():
    with pytest.raises(IndexError):
        SList().filter_mut(lambda e: True)