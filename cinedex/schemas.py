"""
Response schemas for consumers of the recommendation engine.
Pydantic models turn engine results into JSON-ready payloads for display and analytics.
"""

from typing import List, Optional

# Pydantic for validated, serializable response models
from pydantic import BaseModel

from .models import HashTableStats, MovieRecord, RecommendationResult, ScoredMovie, TreeStats, VisualizationStep


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: str  # unique id
	title: str  # human-readable title
	year: int  # release year
	genres: List[str]  # list of genres
	rating: float  # average rating
	director: str = ''  # director name
	actors: List[str] = []  # subset of actors for brevity
	description: Optional[str] = None  # short synopsis snippet
	poster: Optional[str] = None  # optional poster image URL
	duration: int  # runtime in minutes
	language: str  # spoken language
	popularity: float  # popularity score

	@classmethod
	def from_movie(cls, movie: MovieRecord) -> 'MovieOut':
		return cls(
			id=movie.id,
			title=movie.title,
			year=movie.year,
			genres=list(movie.genres),
			rating=movie.rating,
			director=movie.director,
			actors=list(movie.actors[:5]),
			description=movie.description[:350] if movie.description else None,
			poster=movie.poster,
			duration=movie.duration,
			language=movie.language,
			popularity=movie.popularity,
		)


# Pydantic model for a single ranked recommendation
class ScoredMovieOut(BaseModel):
	movie: MovieOut  # movie metadata
	score: float  # final weighted score
	genre_match: float
	rating_score: float
	popularity_score: float
	recency_score: float

	@classmethod
	def from_scored(cls, scored: ScoredMovie) -> 'ScoredMovieOut':
		return cls(
			movie=MovieOut.from_movie(scored.movie),
			score=round(scored.score, 3),
			genre_match=round(scored.genre_match, 3),
			rating_score=round(scored.rating_score, 3),
			popularity_score=round(scored.popularity_score, 3),
			recency_score=round(scored.recency_score, 3),
		)


class StepOut(BaseModel):
	step: int
	description: str
	data_structure: str
	highlight_nodes: List[str]
	details: str

	@classmethod
	def from_step(cls, step: VisualizationStep) -> 'StepOut':
		return cls(
			step=step.step,
			description=step.description,
			data_structure=step.data_structure,
			highlight_nodes=list(step.highlight_nodes),
			details=step.details,
		)


class HashTableStatsOut(BaseModel):
	size: int
	unique_hashes: int
	collisions: int
	load_factor: float
	average_bucket_size: float

	@classmethod
	def from_stats(cls, stats: HashTableStats) -> 'HashTableStatsOut':
		return cls(
			size=stats.size,
			unique_hashes=stats.unique_hashes,
			collisions=stats.collisions,
			load_factor=stats.load_factor,
			average_bucket_size=stats.average_bucket_size,
		)


class TreeStatsOut(BaseModel):
	size: int
	height: int
	is_balanced: bool

	@classmethod
	def from_stats(cls, stats: TreeStats) -> 'TreeStatsOut':
		return cls(size=stats.size, height=stats.height, is_balanced=stats.is_balanced)


class RecommendationStatsOut(BaseModel):
	hash_table_stats: HashTableStatsOut
	bst_stats: TreeStatsOut
	linked_list_size: int  # movies that survived filtering
	total_movies_processed: int  # catalog size
	filtering_time: float  # ms
	scoring_time: float  # ms
	ranking_time: float  # ms


# Pydantic model for the complete recommendation payload
class RecommendationResponse(BaseModel):
	recommendations: List[ScoredMovieOut]  # ranked items
	steps: List[StepOut]  # pipeline trace
	stats: RecommendationStatsOut  # structure statistics and timings

	@classmethod
	def from_result(cls, result: RecommendationResult) -> 'RecommendationResponse':
		"""Convert an engine result into the response schema."""
		stats = result.stats
		return cls(
			recommendations=[ScoredMovieOut.from_scored(r) for r in result.recommendations],
			steps=[StepOut.from_step(s) for s in result.steps],
			stats=RecommendationStatsOut(
				hash_table_stats=HashTableStatsOut.from_stats(stats.hash_table_stats),
				bst_stats=TreeStatsOut.from_stats(stats.bst_stats),
				linked_list_size=stats.linked_list_size,
				total_movies_processed=stats.total_movies_processed,
				filtering_time=round(stats.filtering_time, 2),
				scoring_time=round(stats.scoring_time, 2),
				ranking_time=round(stats.ranking_time, 2),
			),
		)
