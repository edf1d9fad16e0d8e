"""
Hash table keyed by strings.
Entries live in one flat dict under a composite "<hash>_<key>" string; buckets are
reconstructed from the hash prefixes when statistics or visualization ask for them.
"""

from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .models import Bucket, HashTableStats

V = TypeVar('V')
U = TypeVar('U')

_MISSING = object()


class HashTable(Generic[V]):
	"""
	String-keyed store with djb2 hashing.

	`size` counts every `set` call, including overwrites of an existing key,
	and is decremented by each successful `delete`.
	"""

	def __init__(self):
		self._table: Dict[str, V] = {}  # composite key -> value, insertion ordered
		self._hash_counts: Dict[int, int] = {}  # hash -> number of stored keys with that hash
		self._size = 0
		self._collision_count = 0

	@staticmethod
	def hash(key: str) -> int:
		"""djb2: seed 5381, hash * 33 + code point per character in 32-bit arithmetic, absolute value."""
		value = 5381
		for ch in key:
			value = (value * 33 + ord(ch)) & 0xFFFFFFFF
		if value >= 0x80000000:  # reinterpret as signed int32
			value -= 0x100000000
		return abs(value)

	def _composite(self, key: str) -> str:
		return f"{self.hash(key)}_{key}"

	@staticmethod
	def _split(composite: str) -> Tuple[int, str]:
		# the hash prefix is all digits, so the first underscore is the separator
		prefix, _, key = composite.partition('_')
		return int(prefix), key

	def set(self, key: str, value: V) -> None:
		"""Insert or overwrite `key`. A new key sharing an existing hash counts as a collision."""
		hashed = self.hash(key)
		composite = f"{hashed}_{key}"
		if composite not in self._table:
			if self._hash_counts.get(hashed, 0) > 0:
				self._collision_count += 1
			self._hash_counts[hashed] = self._hash_counts.get(hashed, 0) + 1
		self._table[composite] = value
		self._size += 1

	def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
		"""Return the value stored for `key`, or `default` when absent."""
		return self._table.get(self._composite(key), default)

	def has(self, key: str) -> bool:
		return self._table.get(self._composite(key), _MISSING) is not _MISSING

	def delete(self, key: str) -> bool:
		"""Remove `key`; returns whether an entry was removed."""
		hashed = self.hash(key)
		composite = f"{hashed}_{key}"
		if composite not in self._table:
			return False
		del self._table[composite]
		remaining = self._hash_counts[hashed] - 1
		if remaining:
			self._hash_counts[hashed] = remaining
		else:
			del self._hash_counts[hashed]
		self._size -= 1
		return True

	def keys(self) -> List[str]:
		return [self._split(composite)[1] for composite in self._table]

	def values(self) -> List[V]:
		return list(self._table.values())

	def entries(self) -> List[Tuple[str, V]]:
		return [(self._split(composite)[1], value) for composite, value in self._table.items()]

	def get_size(self) -> int:
		return self._size

	def is_empty(self) -> bool:
		return self._size == 0

	def clear(self) -> None:
		self._table.clear()
		self._hash_counts.clear()
		self._size = 0
		self._collision_count = 0

	def get_collision_count(self) -> int:
		return self._collision_count

	def get_load_factor(self) -> float:
		"""Ratio of counted insertions to distinct stored entries (0.0 when empty)."""
		if not self._table:
			return 0.0
		return self._size / len(self._table)

	def filter(self, predicate: Callable[[V], bool]) -> List[V]:
		return [value for value in self._table.values() if predicate(value)]

	def map(self, transform: Callable[[V], U]) -> List[U]:
		return [transform(value) for value in self._table.values()]

	def find(self, predicate: Callable[[V], bool]) -> Optional[V]:
		for value in self._table.values():
			if predicate(value):
				return value
		return None

	def get_buckets(self) -> List[Bucket]:
		"""Group stored keys by hash, ascending by hash value."""
		buckets: Dict[int, List[str]] = {}
		for composite in self._table:
			hashed, key = self._split(composite)
			buckets.setdefault(hashed, []).append(key)
		return [Bucket(hash=hashed, keys=keys) for hashed, keys in sorted(buckets.items())]

	def get_stats(self) -> HashTableStats:
		buckets = self.get_buckets()
		unique_hashes = len(buckets)
		total_items = sum(len(bucket.keys) for bucket in buckets)
		return HashTableStats(
			size=self._size,
			unique_hashes=unique_hashes,
			collisions=self._collision_count,
			load_factor=self.get_load_factor(),
			average_bucket_size=total_items / unique_hashes if unique_hashes > 0 else 0.0,
		)

	def __len__(self) -> int:
		return self._size

	def __contains__(self, key: str) -> bool:
		return self.has(key)
