"""
Unit tests for LinkedList: insertion, deletion, traversal, and stable merge sort.
Run: pytest tests/test_linked_list.py
"""

import random

from cinedex.linked_list import LinkedList


def build(values):
	linked = LinkedList()
	for value in values:
		linked.append(value)
	return linked


def assert_tail_consistent(linked):
	"""tail must be the last node reachable from head, or both empty."""
	head = linked.get_head()
	if head is None:
		assert linked.get_tail() is None
		assert linked.get_size() == 0
		return
	count = 1
	node = head
	while node.next is not None:
		node = node.next
		count += 1
	assert node is linked.get_tail()
	assert count == linked.get_size()


def test_append_round_trip():
	values = list(range(20))
	linked = build(values)

	assert linked.to_array() == values
	assert list(linked) == values
	assert len(linked) == 20
	assert_tail_consistent(linked)


def test_prepend_and_insert_at():
	linked = LinkedList()
	linked.prepend('b')
	linked.prepend('a')
	assert linked.insert_at(2, 'd') is True
	assert linked.insert_at(2, 'c') is True
	assert linked.insert_at(0, 'start') is True

	assert linked.to_array() == ['start', 'a', 'b', 'c', 'd']
	assert_tail_consistent(linked)


def test_insert_at_out_of_bounds_fails():
	linked = build([1, 2])

	assert linked.insert_at(-1, 0) is False
	assert linked.insert_at(3, 0) is False
	assert linked.to_array() == [1, 2]


def test_delete_first_match_updates_tail():
	linked = build([1, 2, 3, 2])

	assert linked.delete(lambda x: x == 2) is True
	assert linked.to_array() == [1, 3, 2]
	assert linked.delete(lambda x: x == 2) is True
	assert linked.to_array() == [1, 3]
	assert linked.get_tail().data == 3
	assert linked.delete(lambda x: x == 99) is False
	assert_tail_consistent(linked)

	assert linked.delete(lambda x: x == 1) is True
	assert linked.delete(lambda x: x == 3) is True
	assert linked.is_empty()
	assert_tail_consistent(linked)
	assert linked.delete(lambda x: True) is False


def test_find_filter_map():
	linked = build([5, 8, 13, 21])

	assert linked.find(lambda x: x > 10) == 13
	assert linked.find(lambda x: x > 100) is None

	evens = linked.filter(lambda x: x % 2 == 0)
	doubled = linked.map(lambda x: x * 2)
	assert evens.to_array() == [8]
	assert doubled.to_array() == [10, 16, 26, 42]
	assert linked.to_array() == [5, 8, 13, 21]  # source untouched


def test_sort_orders_and_keeps_elements():
	rng = random.Random(7)
	values = [rng.randint(0, 50) for _ in range(200)]
	linked = build(values)

	linked.sort(lambda a, b: a - b)

	assert linked.to_array() == sorted(values)
	assert_tail_consistent(linked)


def test_sort_is_stable():
	pairs = [(3, 'a'), (1, 'b'), (3, 'c'), (2, 'd'), (1, 'e'), (3, 'f')]
	linked = build(pairs)

	linked.sort(lambda x, y: x[0] - y[0])

	assert linked.to_array() == [(1, 'b'), (1, 'e'), (2, 'd'), (3, 'a'), (3, 'c'), (3, 'f')]


def test_sort_empty_and_single():
	empty = LinkedList()
	empty.sort(lambda a, b: a - b)
	assert empty.to_array() == []
	assert_tail_consistent(empty)

	single = build([42])
	single.sort(lambda a, b: a - b)
	assert single.to_array() == [42]
	assert_tail_consistent(single)


def test_clear():
	linked = build([1, 2, 3])
	linked.clear()

	assert linked.to_array() == []
	assert_tail_consistent(linked)
