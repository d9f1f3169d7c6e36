import pytest

from algostructs.slist import SList, SListEntry


def test_empty_list():
    slist = SList()
    assert len(slist) == 0
    assert slist.to_array() == []
    assert slist.head is None


def test_init_keeps_order():
    slist = SList([4, 8, 15])
    assert slist.to_array() == [4, 8, 15]
    assert len(slist) == 3


def test_prepend_and_append():
    slist = SList()
    b = slist.append("b")
    a = slist.prepend("a")
    c = slist.append("c")
    assert slist.to_array() == ["a", "b", "c"]
    assert slist.head is a
    assert a.next is b
    assert b.next is c
    assert c.next is None


def test_entry_data_can_be_set():
    slist = SList([1, 2, 3])
    entry = slist.nth_entry(1)
    entry.data = 20
    assert slist.to_array() == [1, 20, 3]


def test_nth_entry_and_data():
    values = [89, 4, 23, 42, 16]
    slist = SList(values)
    for index, value in enumerate(values):
        assert slist.nth_data(index) == value
        assert slist.nth_entry(index).data == value


@pytest.mark.parametrize("index", [5, 100, -1])
def test_nth_out_of_range(index):
    slist = SList([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        slist.nth_data(index)
    with pytest.raises(IndexError):
        slist.nth_entry(index)


def test_remove_entry():
    slist = SList([1, 2, 3, 4])
    slist.remove_entry(slist.nth_entry(0))
    assert slist.to_array() == [2, 3, 4]
    slist.remove_entry(slist.nth_entry(2))
    assert slist.to_array() == [2, 3]
    slist.remove_entry(slist.nth_entry(1))
    assert slist.to_array() == [2]
    assert len(slist) == 1


def test_remove_entry_not_in_list():
    slist = SList([1, 2])
    with pytest.raises(ValueError):
        slist.remove_entry(SListEntry(1))
    assert slist.to_array() == [1, 2]
    with pytest.raises(ValueError):
        SList().remove_entry(SListEntry(1))


def test_remove_data():
    entries = [89, 4, 23, 42, 4, 16, 15, 4, 8, 99, 50, 30, 4]
    slist = SList(entries)
    assert slist.remove_data(4) == entries.count(4)
    assert len(slist) == len(entries) - entries.count(4)
    assert 4 not in slist.to_array()
    assert slist.remove_data(0) == 0
    assert slist.remove_data(89) == 1
    assert slist.to_array() == [x for x in entries if x not in (4, 89)]


def test_remove_data_custom_equal():
    slist = SList(["a", "B", "b", "c"])
    removed = slist.remove_data("b", lambda x, y: x.lower() == y.lower())
    assert removed == 2
    assert slist.to_array() == ["a", "c"]


def test_sort():
    entries = [89, 4, 23, 42, 4, 16, 15, 4, 8, 99, 50, 30, 4]
    slist = SList(entries)
    slist.sort()
    assert slist.to_array() == sorted(entries)
    assert len(slist) == len(entries)


def test_sort_custom_compare_keeps_entries():
    slist = SList([3, 1, 2])
    originals = {id(e) for e in (slist.nth_entry(i) for i in range(3))}
    slist.sort(lambda a, b: b - a)
    assert slist.to_array() == [3, 2, 1]
    assert {id(slist.nth_entry(i)) for i in range(3)} == originals


def test_sort_empty_and_single():
    empty = SList()
    empty.sort()
    assert empty.to_array() == []
    single = SList([7])
    single.sort()
    assert single.to_array() == [7]


def test_find_data():
    slist = SList([89, 4, 23, 42])
    entry = slist.find_data(23)
    assert entry is slist.nth_entry(2)
    assert slist.find_data(57) is None
    assert slist.find_data(5, lambda a, b: a % 2 == b % 2) is slist.nth_entry(0)


def test_iterate_reads_all():
    values = list(range(50))
    slist = SList(values)
    assert list(slist.iterate()) == values


def test_iterate_remove_while_iterating():
    slist = SList(range(20))
    iterator = slist.iterate()
    seen = []
    for value in iterator:
        seen.append(value)
        if value % 2 == 0:
            iterator.remove()
    assert seen == list(range(20))
    assert slist.to_array() == [x for x in range(20) if x % 2]
    assert len(slist) == 10


def test_iterator_has_more():
    slist = SList([1, 2])
    iterator = slist.iterate()
    assert iterator.has_more() is True
    assert next(iterator) == 1
    assert iterator.has_more() is True
    iterator.remove()
    assert iterator.has_more() is True
    assert next(iterator) == 2
    assert iterator.has_more() is False
    with pytest.raises(StopIteration):
        next(iterator)
    assert slist.to_array() == [2]


def test_iterator_remove_without_current_does_nothing():
    slist = SList([1, 2, 3])
    iterator = slist.iterate()
    iterator.remove()
    assert slist.to_array() == [1, 2, 3]
    next(iterator)
    iterator.remove()
    iterator.remove()
    assert slist.to_array() == [2, 3]
    assert len(slist) == 2


def test_iterate_empty():
    iterator = SList().iterate()
    assert iterator.has_more() is False
    with pytest.raises(StopIteration):
        next(iterator)


def test_clear():
    slist = SList([1, 2, 3])
    slist.clear()
    assert len(slist) == 0
    assert slist.to_array() == []
    slist.append(9)
    assert slist.to_array() == [9]