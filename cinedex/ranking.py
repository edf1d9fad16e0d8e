"""
Ranking module.
Combines genre overlap with rating, popularity, and recency signals to produce a final score.
"""

from datetime import datetime
from typing import Optional, Sequence, Set

from .models import MovieRecord, RecommendationWeights, ScoredMovie


class Ranker:
	"""
	Computes weighted scores from four signals, each in [0..1]:
	- genre_match: overlap between the movie's genres and the preferred genres
	- rating_score: rating (0..10) scaled to 0..1
	- popularity_score: popularity (0..100) scaled to 0..1
	- recency_score: 1 at the reference year, losing 0.01 per year of age
	"""

	def __init__(
		self,
		weights: Optional[RecommendationWeights] = None,
		current_year: Optional[int] = None,
	):
		self.weights = weights or RecommendationWeights()
		self.current_year = current_year if current_year is not None else datetime.now().year

	def score(self, movie: MovieRecord, preferred_genres: Sequence[str]) -> ScoredMovie:
		"""
		Combine all signals into a single score.
		Weights are applied as given, so the score is only bounded by 1 when they sum to 1.
		"""
		genre_match = self.genre_match(movie, preferred_genres)
		rating_score = movie.rating / 10
		popularity_score = movie.popularity / 100
		recency_score = self.recency_score(movie)

		final_score = (
			genre_match * self.weights.genre_weight +
			rating_score * self.weights.rating_weight +
			popularity_score * self.weights.popularity_weight +
			recency_score * self.weights.recency_weight
		)
		return ScoredMovie(
			movie=movie,
			score=final_score,
			genre_match=genre_match,
			rating_score=rating_score,
			popularity_score=popularity_score,
			recency_score=recency_score,
		)

	def genre_match(self, movie: MovieRecord, preferred_genres: Sequence[str]) -> float:
		"""
		Matching genres divided by the larger of the two genre lists.
		Returns 1 when no genres are preferred.
		"""
		if not preferred_genres:
			return 1.0
		# both sides are compared as sets; repeated tags count once
		preferred: Set[str] = set(preferred_genres)
		movie_genres: Set[str] = set(movie.genres)
		return len(movie_genres & preferred) / max(len(movie_genres), len(preferred))

	def recency_score(self, movie: MovieRecord) -> float:
		age = self.current_year - movie.year
		return max(0.0, 1 - age / 100)
