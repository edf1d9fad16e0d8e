"""
In-memory movie recommendation engine built on a hash table, a linked list, and an AVL tree.
"""

from .avl_tree import BinarySearchTree
from .data_loader import DataLoader
from .hash_table import HashTable
from .linked_list import LinkedList
from .models import MovieRecord, RecommendationWeights, UserPreferences
from .recommendation_engine import RecommendationEngine

__all__ = [
	'BinarySearchTree',
	'DataLoader',
	'HashTable',
	'LinkedList',
	'MovieRecord',
	'RecommendationEngine',
	'RecommendationWeights',
	'UserPreferences',
]
