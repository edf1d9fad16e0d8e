"""
Singly linked list with tracked head/tail and a stable merge sort.
"""

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')


class ListNode(Generic[T]):
	__slots__ = ('data', 'next')

	def __init__(self, data: T, next: Optional['ListNode[T]'] = None):
		self.data = data
		self.next = next


class LinkedList(Generic[T]):
	"""
	Sequence of nodes from `head` to `tail`.
	`tail` is the last node reachable from `head`; both are None when the list is empty.
	"""

	def __init__(self):
		self._head: Optional[ListNode[T]] = None
		self._tail: Optional[ListNode[T]] = None
		self._size = 0

	def append(self, data: T) -> None:
		node = ListNode(data)
		if self._head is None:
			self._head = node
			self._tail = node
		else:
			self._tail.next = node
			self._tail = node
		self._size += 1

	def prepend(self, data: T) -> None:
		node = ListNode(data, self._head)
		self._head = node
		if self._tail is None:
			self._tail = node
		self._size += 1

	def insert_at(self, index: int, data: T) -> bool:
		"""Insert before position `index`; False when index is outside [0, size]."""
		if index < 0 or index > self._size:
			return False
		if index == 0:
			self.prepend(data)
			return True
		if index == self._size:
			self.append(data)
			return True

		current = self._head
		for _ in range(index - 1):
			current = current.next
		current.next = ListNode(data, current.next)
		self._size += 1
		return True

	def delete(self, predicate: Callable[[T], bool]) -> bool:
		"""Unlink the first node whose data satisfies `predicate`."""
		if self._head is None:
			return False

		if predicate(self._head.data):
			self._head = self._head.next
			if self._head is None:
				self._tail = None
			self._size -= 1
			return True

		current = self._head
		while current.next is not None and not predicate(current.next.data):
			current = current.next

		if current.next is None:
			return False
		current.next = current.next.next
		if current.next is None:
			self._tail = current
		self._size -= 1
		return True

	def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
		current = self._head
		while current is not None:
			if predicate(current.data):
				return current.data
			current = current.next
		return None

	def to_array(self) -> List[T]:
		return list(self)

	def get_size(self) -> int:
		return self._size

	def is_empty(self) -> bool:
		return self._size == 0

	def clear(self) -> None:
		self._head = None
		self._tail = None
		self._size = 0

	def get_head(self) -> Optional[ListNode[T]]:
		return self._head

	def get_tail(self) -> Optional[ListNode[T]]:
		return self._tail

	def filter(self, predicate: Callable[[T], bool]) -> 'LinkedList[T]':
		result: LinkedList[T] = LinkedList()
		for data in self:
			if predicate(data):
				result.append(data)
		return result

	def map(self, transform: Callable[[T], U]) -> 'LinkedList[U]':
		result: LinkedList[U] = LinkedList()
		for data in self:
			result.append(transform(data))
		return result

	def sort(self, compare: Callable[[T, T], float]) -> None:
		"""Stable in-place merge sort by a three-way comparator."""
		self._head = self._merge_sort(self._head, compare)

		current = self._head
		while current is not None and current.next is not None:
			current = current.next
		self._tail = current

	def _merge_sort(self, head: Optional[ListNode[T]], compare) -> Optional[ListNode[T]]:
		if head is None or head.next is None:
			return head

		middle = self._get_middle(head)
		second = middle.next
		middle.next = None

		left = self._merge_sort(head, compare)
		right = self._merge_sort(second, compare)
		return self._sorted_merge(left, right, compare)

	@staticmethod
	def _get_middle(head: ListNode[T]) -> ListNode[T]:
		# last node of the first half; even-length lists split evenly
		slow = head
		fast = head
		while fast.next is not None and fast.next.next is not None:
			slow = slow.next
			fast = fast.next.next
		return slow

	@staticmethod
	def _sorted_merge(a: Optional[ListNode[T]], b: Optional[ListNode[T]], compare) -> Optional[ListNode[T]]:
		dummy: ListNode = ListNode(None)
		tail = dummy
		while a is not None and b is not None:
			# ties take from the left run first
			if compare(a.data, b.data) <= 0:
				tail.next = a
				a = a.next
			else:
				tail.next = b
				b = b.next
			tail = tail.next
		tail.next = a if a is not None else b
		return dummy.next

	def __len__(self) -> int:
		return self._size

	def __iter__(self) -> Iterator[T]:
		current = self._head
		while current is not None:
			yield current.data
			current = current.next
