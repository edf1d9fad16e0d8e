"""
AVL tree module.
Self-balancing binary search tree ordered by a caller-supplied three-way comparator,
with pruned range and top-k queries used by the recommendation engine.
"""

from typing import Any, Callable, Generic, List, Optional, TypeVar

from .models import TreeSnapshot, TreeStats

T = TypeVar('T')

Comparator = Callable[[Any, Any], float]


class TreeNode(Generic[T]):
	__slots__ = ('data', 'left', 'right', 'height')

	def __init__(self, data: T):
		self.data = data
		self.left: Optional['TreeNode[T]'] = None
		self.right: Optional['TreeNode[T]'] = None
		self.height = 1  # leaf height


class BinarySearchTree(Generic[T]):
	"""
	AVL tree keyed by `compare(a, b)` (negative, zero, or positive).

	Values that compare equal to a stored value are not inserted, so the tree
	holds at most one value per comparator key. After every insert or delete
	each node's balance factor is in {-1, 0, 1}.
	"""

	def __init__(self, compare: Comparator):
		self._compare = compare
		self._root: Optional[TreeNode[T]] = None
		self._size = 0

	# ------------------------------------------------------------------
	# Height bookkeeping and rotations
	# ------------------------------------------------------------------

	@staticmethod
	def _node_height(node: Optional[TreeNode[T]]) -> int:
		return node.height if node is not None else 0

	def _balance_factor(self, node: Optional[TreeNode[T]]) -> int:
		if node is None:
			return 0
		return self._node_height(node.left) - self._node_height(node.right)

	def _update_height(self, node: TreeNode[T]) -> None:
		node.height = 1 + max(self._node_height(node.left), self._node_height(node.right))

	def _rotate_right(self, y: TreeNode[T]) -> TreeNode[T]:
		x = y.left
		y.left = x.right
		x.right = y
		self._update_height(y)
		self._update_height(x)
		return x

	def _rotate_left(self, x: TreeNode[T]) -> TreeNode[T]:
		y = x.right
		x.right = y.left
		y.left = x
		self._update_height(x)
		self._update_height(y)
		return y

	# ------------------------------------------------------------------
	# Mutation
	# ------------------------------------------------------------------

	def insert(self, data: T) -> None:
		"""Insert `data`; a no-op when an equal value is already stored."""
		self._root = self._insert_node(self._root, data)

	def _insert_node(self, node: Optional[TreeNode[T]], data: T) -> TreeNode[T]:
		if node is None:
			self._size += 1
			return TreeNode(data)

		cmp = self._compare(data, node.data)
		if cmp < 0:
			node.left = self._insert_node(node.left, data)
		elif cmp > 0:
			node.right = self._insert_node(node.right, data)
		else:
			return node

		self._update_height(node)
		balance = self._balance_factor(node)

		# Left-Left
		if balance > 1 and self._compare(data, node.left.data) < 0:
			return self._rotate_right(node)
		# Right-Right
		if balance < -1 and self._compare(data, node.right.data) > 0:
			return self._rotate_left(node)
		# Left-Right
		if balance > 1 and self._compare(data, node.left.data) > 0:
			node.left = self._rotate_left(node.left)
			return self._rotate_right(node)
		# Right-Left
		if balance < -1 and self._compare(data, node.right.data) < 0:
			node.right = self._rotate_right(node.right)
			return self._rotate_left(node)

		return node

	def delete(self, data: T) -> bool:
		"""Remove the value comparing equal to `data`; returns whether one was removed."""
		initial_size = self._size
		self._root = self._delete_node(self._root, data)
		return self._size < initial_size

	def _delete_node(self, node: Optional[TreeNode[T]], data: T) -> Optional[TreeNode[T]]:
		if node is None:
			return None

		cmp = self._compare(data, node.data)
		if cmp < 0:
			node.left = self._delete_node(node.left, data)
		elif cmp > 0:
			node.right = self._delete_node(node.right, data)
		else:
			if node.left is None or node.right is None:
				self._size -= 1
				return node.left if node.left is not None else node.right

			# two children: take over the in-order successor, then remove it below
			successor = self._find_min(node.right)
			node.data = successor.data
			node.right = self._delete_node(node.right, successor.data)

		self._update_height(node)
		balance = self._balance_factor(node)

		# Left-Left
		if balance > 1 and self._balance_factor(node.left) >= 0:
			return self._rotate_right(node)
		# Left-Right
		if balance > 1 and self._balance_factor(node.left) < 0:
			node.left = self._rotate_left(node.left)
			return self._rotate_right(node)
		# Right-Right
		if balance < -1 and self._balance_factor(node.right) <= 0:
			return self._rotate_left(node)
		# Right-Left
		if balance < -1 and self._balance_factor(node.right) > 0:
			node.right = self._rotate_right(node.right)
			return self._rotate_left(node)

		return node

	@staticmethod
	def _find_min(node: TreeNode[T]) -> TreeNode[T]:
		while node.left is not None:
			node = node.left
		return node

	def clear(self) -> None:
		self._root = None
		self._size = 0

	# ------------------------------------------------------------------
	# Lookup
	# ------------------------------------------------------------------

	def search(self, data: T) -> Optional[T]:
		"""Comparator-guided descent; returns the stored value equal to `data`."""
		node = self._root
		while node is not None:
			cmp = self._compare(data, node.data)
			if cmp == 0:
				return node.data
			node = node.left if cmp < 0 else node.right
		return None

	def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
		"""Pre-order scan of the whole tree for the first value matching `predicate`."""
		return self._find_node(self._root, predicate)

	def _find_node(self, node: Optional[TreeNode[T]], predicate: Callable[[T], bool]) -> Optional[T]:
		if node is None:
			return None
		if predicate(node.data):
			return node.data
		found = self._find_node(node.left, predicate)
		if found is not None:
			return found
		return self._find_node(node.right, predicate)

	# ------------------------------------------------------------------
	# Traversals
	# ------------------------------------------------------------------

	def in_order(self) -> List[T]:
		result: List[T] = []
		self._in_order(self._root, result)
		return result

	def _in_order(self, node: Optional[TreeNode[T]], result: List[T]) -> None:
		if node is not None:
			self._in_order(node.left, result)
			result.append(node.data)
			self._in_order(node.right, result)

	def pre_order(self) -> List[T]:
		result: List[T] = []
		self._pre_order(self._root, result)
		return result

	def _pre_order(self, node: Optional[TreeNode[T]], result: List[T]) -> None:
		if node is not None:
			result.append(node.data)
			self._pre_order(node.left, result)
			self._pre_order(node.right, result)

	def post_order(self) -> List[T]:
		result: List[T] = []
		self._post_order(self._root, result)
		return result

	def _post_order(self, node: Optional[TreeNode[T]], result: List[T]) -> None:
		if node is not None:
			self._post_order(node.left, result)
			self._post_order(node.right, result)
			result.append(node.data)

	def range_search(self, low: T, high: T) -> List[T]:
		"""Values v with low <= v <= high under the comparator, ascending."""
		result: List[T] = []
		self._range_search(self._root, low, high, result)
		return result

	def _range_search(self, node: Optional[TreeNode[T]], low: T, high: T, result: List[T]) -> None:
		if node is None:
			return
		above_low = self._compare(low, node.data) <= 0
		below_high = self._compare(node.data, high) <= 0
		if above_low:
			self._range_search(node.left, low, high, result)
		if above_low and below_high:
			result.append(node.data)
		if below_high:
			self._range_search(node.right, low, high, result)

	def get_k_largest(self, k: int) -> List[T]:
		"""Up to `k` largest values in descending order."""
		result: List[T] = []
		self._reverse_in_order(self._root, k, result)
		return result

	def _reverse_in_order(self, node: Optional[TreeNode[T]], k: int, result: List[T]) -> None:
		if node is None or len(result) >= k:
			return
		self._reverse_in_order(node.right, k, result)
		if len(result) < k:
			result.append(node.data)
			self._reverse_in_order(node.left, k, result)

	# ------------------------------------------------------------------
	# Introspection
	# ------------------------------------------------------------------

	def get_height(self) -> int:
		return self._node_height(self._root)

	def get_size(self) -> int:
		return self._size

	def is_empty(self) -> bool:
		return self._size == 0

	def get_root(self) -> Optional[TreeNode[T]]:
		return self._root

	def get_tree_structure(self) -> TreeSnapshot:
		return self._node_to_dict(self._root)

	def _node_to_dict(self, node: Optional[TreeNode[T]]) -> TreeSnapshot:
		if node is None:
			return None
		return {
			'data': node.data,
			'height': node.height,
			'left': self._node_to_dict(node.left),
			'right': self._node_to_dict(node.right),
		}

	def get_stats(self) -> TreeStats:
		return TreeStats(
			size=self._size,
			height=self.get_height(),
			is_balanced=abs(self._balance_factor(self._root)) <= 1,
		)

	def __len__(self) -> int:
		return self._size
