"""
Recommendation engine module.
Indexes the catalog into a hash table, a genre index of linked lists, and AVL trees,
then runs the filter -> score -> rank pipeline with a step trace for visualization.
"""

import time  # stage timings
from types import SimpleNamespace  # lightweight probes for tree range queries
from typing import Dict, Iterable, List, Optional, Tuple

# Import project modules for the data structures and scoring
from .avl_tree import BinarySearchTree  # ordered indices and ranking
from .hash_table import HashTable  # primary and genre indices
from .linked_list import LinkedList  # per-genre lists and pipeline buffers
from .models import (
	Bucket,
	EngineStats,
	MovieRecord,
	RecommendationResult,
	RecommendationStats,
	RecommendationWeights,
	ScoredMovie,
	TreeSnapshot,
	UserPreferences,
	VisualizationStep,
)
from .ranking import Ranker  # weighted scoring

# Import loguru for console logging
from loguru import logger  # simple structured logger

# Number of example ids attached to each pipeline step
HIGHLIGHT_LIMIT = 5


def _elapsed_ms(start: float) -> float:
	return (time.perf_counter() - start) * 1000


class RecommendationEngine:
	"""
	Read-only snapshot of a movie catalog with query and recommendation APIs.

	All indices are built once in the constructor; no method mutates them, so
	concurrent readers are safe. The rating, year, and popularity trees keep one
	movie per distinct key (the first one seen in catalog order).
	"""

	def __init__(
		self,
		movies: Iterable[MovieRecord],  # catalog snapshot
		current_year: Optional[int] = None,  # reference year for recency scores
		stable_ties: bool = False,  # keep movies with tied scores when ranking
	):
		self.current_year = current_year  # None means "use the wall clock"
		self.stable_ties = stable_ties  # ranking tie policy

		# Primary store and secondary genre index
		self.movie_table: HashTable[MovieRecord] = HashTable()  # id -> movie
		self.genre_index: HashTable[LinkedList[MovieRecord]] = HashTable()  # genre -> movies

		# Ordered indices, compared by plain numeric difference on one field
		self.rating_tree: BinarySearchTree[MovieRecord] = BinarySearchTree(lambda a, b: a.rating - b.rating)
		self.year_tree: BinarySearchTree[MovieRecord] = BinarySearchTree(lambda a, b: a.year - b.year)
		self.popularity_tree: BinarySearchTree[MovieRecord] = BinarySearchTree(lambda a, b: a.popularity - b.popularity)

		start = time.perf_counter()  # time index construction
		self._build_indices(movies)  # populate every structure
		logger.info(
			f"[Engine] Indexed {self.movie_table.get_size()} movies across {self.genre_index.get_size()} genres in {_elapsed_ms(start):.2f} ms"
		)

	def _build_indices(self, movies: Iterable[MovieRecord]) -> None:
		"""Insert every movie into the primary table, its genre lists, and the three trees."""
		for movie in movies:  # catalog order is preserved in every genre list
			self.movie_table.set(movie.id, movie)  # primary lookup

			for genre in movie.genres:  # one list per genre tag
				genre_list = self.genre_index.get(genre)
				if genre_list is None:  # first movie seen with this genre
					genre_list = LinkedList()
					self.genre_index.set(genre, genre_list)
				genre_list.append(movie)

			# Ordered indices; movies with an already-present key are skipped by the tree
			self.rating_tree.insert(movie)
			self.year_tree.insert(movie)
			self.popularity_tree.insert(movie)

		logger.debug(
			f"[Engine] Tree sizes | rating={self.rating_tree.get_size()} year={self.year_tree.get_size()} popularity={self.popularity_tree.get_size()}"
		)

	# ------------------------------------------------------------------
	# Recommendation pipeline
	# ------------------------------------------------------------------

	def get_recommendations(
		self,
		preferences: Optional[UserPreferences] = None,
		weights: Optional[RecommendationWeights] = None,
		limit: int = 10,
	) -> RecommendationResult:
		"""Select candidates, filter, score, and rank; returns results with a step trace and stats."""
		preferences = preferences or UserPreferences()  # defaults when omitted
		weights = weights or RecommendationWeights()  # defaults when omitted
		steps: List[VisualizationStep] = []  # ordered step trace

		# Step 1: primary index overview
		table_stats = self.movie_table.get_stats()
		steps.append(VisualizationStep(
			step=1,
			description='Initializing Hash Table for O(1) movie lookup',
			data_structure='hash',
			highlight_nodes=self.movie_table.keys()[:HIGHLIGHT_LIMIT],
			details=f"Hash Table contains {table_stats.size} movies with {table_stats.unique_hashes} unique hash buckets",
		))

		# Step 2: candidate selection and filtering (adds its own step)
		start = time.perf_counter()
		filtered = self._filter_movies(preferences, steps)
		filtering_time = _elapsed_ms(start)
		logger.debug(f"[Engine] Filtering kept {len(filtered)} movies in {filtering_time:.2f} ms")

		# Step 3: score the filtered movies with a linked-list traversal
		steps.append(VisualizationStep(
			step=3,
			description='Using Linked List to traverse filtered movies',
			data_structure='linkedlist',
			highlight_nodes=[m.id for m in filtered[:HIGHLIGHT_LIMIT]],
			details=f"Traversing {len(filtered)} filtered movies using sequential Linked List traversal",
		))
		start = time.perf_counter()
		scored = self._score_movies(filtered, preferences, weights)
		scoring_time = _elapsed_ms(start)
		logger.debug(f"[Engine] Scored {len(scored)} movies in {scoring_time:.2f} ms")

		# Step 4: rank through a score-keyed AVL tree
		start = time.perf_counter()
		ranked, score_tree = self._rank_movies(scored, limit)
		ranking_time = _elapsed_ms(start)
		tree_stats = score_tree.get_stats()
		steps.append(VisualizationStep(
			step=4,
			description='Using AVL tree for score-based ranking',
			data_structure='binarytree',
			highlight_nodes=[r.movie.id for r in ranked[:HIGHLIGHT_LIMIT]],
			details=(
				f"Score tree holds {tree_stats.size} nodes at height {tree_stats.height}; "
				f"generated {len(ranked)} recommendations from {len(filtered)} filtered movies"
			),
		))

		logger.info(f"[Engine] Returning {len(ranked)} recommendations from {len(filtered)} filtered movies")
		return RecommendationResult(
			recommendations=ranked,
			steps=steps,
			stats=RecommendationStats(
				hash_table_stats=table_stats,
				bst_stats=tree_stats,
				linked_list_size=len(filtered),
				total_movies_processed=self.movie_table.get_size(),
				filtering_time=filtering_time,
				scoring_time=scoring_time,
				ranking_time=ranking_time,
			),
		)

	def _filter_movies(self, preferences: UserPreferences, steps: List[VisualizationStep]) -> List[MovieRecord]:
		"""Union the requested genre lists (or take the whole catalog) and keep movies matching every filter."""
		if preferences.genres:
			# Collapse movies listed under several requested genres, keeping first-seen order
			candidates: Dict[int, MovieRecord] = {}
			for genre in preferences.genres:
				genre_list = self.genre_index.get(genre)
				if genre_list is None:  # unseen genre contributes nothing
					continue
				for movie in genre_list:
					candidates.setdefault(id(movie), movie)
			candidate_movies = list(candidates.values())
			steps.append(VisualizationStep(
				step=2,
				description='Genre filtering using Hash Table index',
				data_structure='hash',
				highlight_nodes=[m.id for m in candidate_movies[:HIGHLIGHT_LIMIT]],
				details=f"Found {len(candidate_movies)} movies matching genres: {', '.join(preferences.genres)}",
			))
		else:
			candidate_movies = self.movie_table.values()
			steps.append(VisualizationStep(
				step=2,
				description='No genre preference, scanning the full Hash Table',
				data_structure='hash',
				highlight_nodes=[m.id for m in candidate_movies[:HIGHLIGHT_LIMIT]],
				details=f"Considering all {len(candidate_movies)} movies",
			))
		logger.debug(f"[Engine] Candidate set has {len(candidate_movies)} movies | genres={preferences.genres}")

		filtered: LinkedList[MovieRecord] = LinkedList()
		for movie in candidate_movies:
			if self._matches_preferences(movie, preferences):
				filtered.append(movie)
		return filtered.to_array()

	@staticmethod
	def _matches_preferences(movie: MovieRecord, preferences: UserPreferences) -> bool:
		if movie.rating < preferences.min_rating:
			return False
		if movie.year < preferences.min_year or movie.year > preferences.max_year:
			return False
		if preferences.languages and movie.language not in preferences.languages:
			return False
		if movie.duration < preferences.min_duration or movie.duration > preferences.max_duration:
			return False
		return True

	def _score_movies(
		self,
		movies: List[MovieRecord],
		preferences: UserPreferences,
		weights: RecommendationWeights,
	) -> List[ScoredMovie]:
		ranker = Ranker(weights, current_year=self.current_year)
		scored: LinkedList[ScoredMovie] = LinkedList()
		for movie in movies:
			scored.append(ranker.score(movie, preferences.genres))
		return scored.to_array()

	def _rank_movies(
		self,
		scored: List[ScoredMovie],
		limit: int,
	) -> Tuple[List[ScoredMovie], BinarySearchTree[Tuple[int, ScoredMovie]]]:
		"""
		Insert (position, scored) pairs into a score-keyed tree and take the top `limit`.
		Without stable ties an equal score is a duplicate key, so only the first movie
		with that score is kept; with stable ties the earlier position ranks higher.
		"""
		if self.stable_ties:
			score_tree = BinarySearchTree(lambda a, b: (a[1].score - b[1].score) or (b[0] - a[0]))
		else:
			score_tree = BinarySearchTree(lambda a, b: a[1].score - b[1].score)

		for position, item in enumerate(scored):
			score_tree.insert((position, item))
		if len(scored) != score_tree.get_size():
			logger.debug(f"[Engine] Dropped {len(scored) - score_tree.get_size()} movies with tied scores")

		ranked = [item for _, item in score_tree.get_k_largest(limit)]
		return ranked, score_tree

	# ------------------------------------------------------------------
	# Index queries
	# ------------------------------------------------------------------

	def search_by_title(self, query: str) -> List[MovieRecord]:
		"""Case-insensitive substring match over every title."""
		needle = query.lower()
		return self.movie_table.filter(lambda movie: needle in movie.title.lower())

	def get_movie_by_id(self, movie_id: str) -> Optional[MovieRecord]:
		"""Return a movie for a given ID, or None if not found."""
		return self.movie_table.get(movie_id)

	def get_movies_by_ids(self, movie_ids: Iterable[str]) -> List[MovieRecord]:
		"""Return the movies for the given IDs in order, skipping unknown IDs."""
		movies = []
		for movie_id in movie_ids:
			movie = self.movie_table.get(movie_id)
			if movie is not None:
				movies.append(movie)
		return movies

	def get_movies_by_genre(self, genre: str) -> List[MovieRecord]:
		genre_list = self.genre_index.get(genre)
		return genre_list.to_array() if genre_list is not None else []

	def get_genres(self) -> List[str]:
		"""Genre tags in the order they were first seen in the catalog."""
		return self.genre_index.keys()

	def get_top_rated(self, limit: int = 10) -> List[MovieRecord]:
		return self.rating_tree.get_k_largest(limit)

	def get_most_popular(self, limit: int = 10) -> List[MovieRecord]:
		return self.popularity_tree.get_k_largest(limit)

	def get_movies_by_year_range(self, min_year: int, max_year: int) -> List[MovieRecord]:
		return self.year_tree.range_search(SimpleNamespace(year=min_year), SimpleNamespace(year=max_year))

	# ------------------------------------------------------------------
	# Introspection
	# ------------------------------------------------------------------

	def get_stats(self) -> EngineStats:
		return EngineStats(
			hash_table=self.movie_table.get_stats(),
			rating_tree=self.rating_tree.get_stats(),
			year_tree=self.year_tree.get_stats(),
			popularity_tree=self.popularity_tree.get_stats(),
			genre_index_size=self.genre_index.get_size(),
		)

	def get_hash_table_buckets(self) -> List[Bucket]:
		return self.movie_table.get_buckets()

	def get_rating_tree_structure(self) -> TreeSnapshot:
		return self.rating_tree.get_tree_structure()

	def __len__(self) -> int:
		return self.movie_table.get_size()
