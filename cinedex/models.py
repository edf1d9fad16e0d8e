"""
Data models for the recommendation engine.
Defines the movie record, the caller-facing query inputs, and the result containers.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, List, Optional  # lists, dicts, and optional values


@dataclass(frozen=True, eq=False)
class MovieRecord:
	"""
	Represents a single movie supplied by the catalog.
	Records are read-only for the engine's lifetime and compare by identity,
	so the same record reached through two genre lists collapses to one candidate.
	"""
	id: str  # unique identifier of the movie (uniqueness assumed, not enforced)
	title: str  # display title
	year: int  # release year (e.g., 1999)
	genres: List[str]  # ordered genre tags (e.g., ["Drama", "War"])
	rating: float  # average rating on a 0-10 scale
	director: str = ''  # director's name
	actors: List[str] = field(default_factory=list)  # cast list
	description: str = ''  # synopsis
	poster: Optional[str] = None  # poster URL or path
	duration: int = 0  # runtime in minutes
	language: str = ''  # spoken language (e.g., "English")
	popularity: float = 0.0  # popularity score on a 0-100 scale


@dataclass
class UserPreferences:
	"""Filters applied to the candidate set before scoring."""
	genres: List[str] = field(default_factory=list)  # empty means "any genre"
	min_rating: float = 6.0
	min_year: int = 1950
	max_year: int = 2024
	languages: List[str] = field(default_factory=list)  # empty means "any language"
	min_duration: int = 60
	max_duration: int = 240


@dataclass
class RecommendationWeights:
	"""Per-signal weights for the scoring stage; not normalized or validated."""
	genre_weight: float = 0.35
	rating_weight: float = 0.25
	popularity_weight: float = 0.20
	recency_weight: float = 0.20


@dataclass
class ScoredMovie:
	movie: MovieRecord  # the scored movie
	score: float  # weighted sum of the four component scores
	genre_match: float  # overlap between movie and preferred genres (0..1)
	rating_score: float  # rating / 10
	popularity_score: float  # popularity / 100
	recency_score: float  # 1 - age / 100, floored at 0


@dataclass
class VisualizationStep:
	"""One stage of the recommendation pipeline as shown to a visualization layer."""
	step: int
	description: str
	data_structure: str  # 'hash' | 'linkedlist' | 'binarytree'
	highlight_nodes: List[str]  # up to 5 example movie ids
	details: str


@dataclass
class Bucket:
	hash: int
	keys: List[str]


@dataclass
class HashTableStats:
	size: int
	unique_hashes: int
	collisions: int
	load_factor: float
	average_bucket_size: float


@dataclass
class TreeStats:
	size: int
	height: int
	is_balanced: bool  # root balance factor only


@dataclass
class RecommendationStats:
	hash_table_stats: HashTableStats  # primary index statistics
	bst_stats: TreeStats  # statistics of the score tree used for ranking
	linked_list_size: int  # number of movies that survived filtering
	total_movies_processed: int  # size of the primary index
	filtering_time: float  # milliseconds
	scoring_time: float  # milliseconds
	ranking_time: float  # milliseconds


@dataclass
class RecommendationResult:
	recommendations: List[ScoredMovie]
	steps: List[VisualizationStep]
	stats: RecommendationStats


@dataclass
class EngineStats:
	hash_table: HashTableStats
	rating_tree: TreeStats
	year_tree: TreeStats
	popularity_tree: TreeStats
	genre_index_size: int


# Nested {data, height, left, right} snapshot returned by tree introspection
TreeSnapshot = Optional[Dict[str, Any]]
