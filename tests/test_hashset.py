import pytest

from algostructs.hashset import HashSet

NUM_TEST_VALUES = 10000


def _nocase_hash(value):
    return hash(value.lower())


def _nocase_equal(a, b):
    return a.lower() == b.lower()


@pytest.fixture
def big_set():
    s = HashSet()
    for i in range(NUM_TEST_VALUES):
        s.insert(str(i))
    return s


def test_new_set_is_empty():
    s = HashSet()
    assert len(s) == 0
    assert s.to_array() == []
    assert "anything" not in s


def test_insert_and_query(big_set):
    assert len(big_set) == NUM_TEST_VALUES
    for i in range(NUM_TEST_VALUES):
        assert big_set.query(str(i))
    assert not big_set.query("-1")
    assert str(NUM_TEST_VALUES) not in big_set


def test_duplicate_insert_rejected():
    s = HashSet()
    assert s.insert("a") is True
    assert s.insert("a") is False
    assert len(s) == 1


def test_remove(big_set):
    assert big_set.remove("5000") is True
    assert len(big_set) == NUM_TEST_VALUES - 1
    assert "5000" not in big_set
    assert big_set.remove("5000") is False
    assert big_set.remove("-1") is False
    assert len(big_set) == NUM_TEST_VALUES - 1


def test_iterate_visits_every_value_once(big_set):
    values = list(big_set)
    assert len(values) == NUM_TEST_VALUES
    assert set(values) == {str(i) for i in range(NUM_TEST_VALUES)}


def test_iterate_empty_set():
    assert list(HashSet()) == []


def test_remove_during_iteration(big_set):
    count = 0
    removed = 0
    for value in big_set:
        if int(value) % 100 == 0:
            assert big_set.remove(value)
            removed += 1
        count += 1
    assert count == NUM_TEST_VALUES
    assert removed == NUM_TEST_VALUES // 100
    assert len(big_set) == NUM_TEST_VALUES - removed
    for i in range(NUM_TEST_VALUES):
        assert (str(i) in big_set) == (i % 100 != 0)


def test_to_array_matches_contents():
    values = [1, 2, 3, 4, 5]
    s = HashSet.from_values(values)
    assert sorted(s.to_array()) == values


def test_union():
    a = HashSet.from_values([1, 2, 3, 4, 5, 6, 7])
    b = HashSet.from_values([5, 6, 7, 8, 9, 10, 11])
    result = a.union(b)
    assert sorted(result) == list(range(1, 12))
    assert len(result) == len(set(a.to_array()) | set(b.to_array()))
    assert sorted(a) == [1, 2, 3, 4, 5, 6, 7]


def test_intersection():
    a = HashSet.from_values([1, 2, 3, 4, 5, 6, 7])
    b = HashSet.from_values([5, 6, 7, 8, 9, 10, 11])
    result = a.intersection(b)
    assert sorted(result) == [5, 6, 7]


def test_custom_hash_and_equal():
    s = HashSet(_nocase_hash, _nocase_equal)
    assert s.insert("Hello")
    assert not s.insert("HELLO")
    assert s.query("hello")
    assert s.remove("hElLo")
    assert len(s) == 0


def test_union_keeps_first_sets_functions():
    a = HashSet(_nocase_hash, _nocase_equal)
    a.insert("Word")
    b = HashSet.from_values(["WORD", "other"])
    result = a.union(b)
    assert len(result) == 2
    assert "word" in result


def test_free_function_called_on_remove_and_clear():
    freed = []
    s = HashSet()
    s.register_free_function(freed.append)
    for i in range(50):
        s.insert(i)
    s.remove(10)
    assert freed == [10]
    s.insert(1)
    assert freed == [10]
    s.clear()
    assert sorted(freed) == list(range(50))
    assert len(s) == 0
    assert 1 not in s


def test_free_function_can_be_unregistered():
    freed = []
    s = HashSet.from_values([1, 2])
    s.register_free_function(freed.append)
    s.register_free_function(None)
    s.remove(1)
    assert freed == []
    assert sorted(s) == [2]


def test_growth_keeps_all_values():
    s = HashSet()
    for i in range(65):
        assert s.insert(i)
    assert len(s) == 65
    assert s.insert(65)
    assert len(s) == 66
    assert all(i in s for i in range(66))


def test_clear_then_reuse():
    s = HashSet.from_values(range(1000))
    s.clear()
    assert len(s) == 0
    assert s.insert(3)
    assert s.to_array() == [3]