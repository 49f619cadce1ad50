import pytest

from algokit.containers import (
    MultiMap,
    Person,
    max_heap_order,
    min_heap_order,
    oldest_first,
    queue_order,
    stack_order,
)

VALUES = [5, 3, 9, 1, 7, 3]


def test_max_heap_order_is_descending_sort():
    assert max_heap_order(VALUES) == sorted(VALUES, reverse=True)


def test_min_heap_order_is_ascending_sort():
    assert min_heap_order(VALUES) == sorted(VALUES)


def test_heap_orders_are_mirror_images():
    assert max_heap_order(VALUES) == list(reversed(min_heap_order(VALUES)))


def test_heap_orders_of_empty_input():
    assert max_heap_order([]) == []
    assert min_heap_order([]) == []


def test_stack_order_reverses():
    assert stack_order(VALUES) == VALUES[::-1]


def test_queue_order_preserves():
    assert queue_order(VALUES) == VALUES


def test_oldest_first_sorted_by_age_descending():
    people = [Person("a", 20), Person("b", 45), Person("c", 33), Person("d", 12)]
    result = oldest_first(people, 3)
    assert len(result) == 3
    ages = [person.age for person in result]
    assert ages == sorted(ages, reverse=True)
    assert result[0] == Person("b", 45)
    assert Person("d", 12) not in result


def test_oldest_first_all_people():
    people = [Person("x", 1), Person("y", 2)]
    assert oldest_first(people, 2) == [Person("y", 2), Person("x", 1)]


@pytest.mark.parametrize("count", [-1, 3])
def test_oldest_first_bad_count(count):
    with pytest.raises(ValueError):
        oldest_first([Person("x", 1), Person("y", 2)], count)


def _sample_multimap():
    mp = MultiMap()
    mp.insert("A", "Saurabh")
    mp.insert("A", "Pandey")
    mp.insert("B", "Hello")
    mp.insert("C", "Hola")
    return mp


def test_multimap_items_sorted_with_insertion_order_per_key():
    mp = MultiMap([("C", "Hola"), ("A", "Saurabh"), ("B", "Hello"), ("A", "Pandey")])
    assert list(mp.items()) == [
        ("A", "Saurabh"),
        ("A", "Pandey"),
        ("B", "Hello"),
        ("C", "Hola"),
    ]
    assert len(mp) == 4


def test_multimap_remove_first_then_all():
    mp = _sample_multimap()
    assert mp.remove_first("A") == "Saurabh"
    assert mp.remove_all("A") == 1
    assert list(mp.items()) == [("B", "Hello"), ("C", "Hola")]
    assert "A" not in mp


def test_multimap_remove_all_missing_key():
    mp = _sample_multimap()
    assert mp.remove_all("Z") == 0
    assert len(mp) == 4


def test_multimap_remove_first_missing_key():
    with pytest.raises(KeyError):
        MultiMap().remove_first("A")


def test_multimap_remove_first_last_value_drops_key():
    mp = MultiMap([("B", "Hello")])
    assert mp.remove_first("B") == "Hello"
    assert "B" not in mp
    assert list(mp.items()) == []