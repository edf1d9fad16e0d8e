"""
Data loading and preprocessing module.
Handles loading movie catalogs from JSONL/JSON and normalizing them into MovieRecord objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines and arrays
from typing import Any, Dict, Iterable, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our MovieRecord data class used across the project
from .models import MovieRecord  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and preprocessing of movie catalogs.
	"""

	# Genre synonym mapping: common spellings -> single catalog name
	GENRE_SYNONYMS = {
		'sci-fi': 'Sci-Fi',  # canonical form
		'sci fi': 'Sci-Fi',  # spaced form
		'scifi': 'Sci-Fi',  # joined form
		'science fiction': 'Sci-Fi',  # long form
		'science-fiction': 'Sci-Fi',  # long form with dash
		'animated': 'Animation',
		'biographical': 'Biography',
		'funny': 'Comedy',
		'romantic': 'Romance',
		'musicals': 'Musical',
	}

	def __init__(self):
		"""Initialize the data loader and expose the synonyms mapping."""
		self.genre_synonyms = self.GENRE_SYNONYMS  # store mapping for reuse

	def load_movies_from_jsonl(self, filepath: str) -> List[MovieRecord]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Malformed lines are logged and skipped.
		"""
		movies = []  # accumulator for parsed records
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Read line-by-line so large catalogs are not held twice in memory
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # blank separator lines are allowed
					continue
				try:
					data = json.loads(line)  # parse JSON object per line
					movies.append(self.parse_movie(data))  # convert dict -> MovieRecord
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
				except (ValueError, TypeError, AttributeError, OverflowError) as e:
					logger.warning(f"[DataLoader] Error parsing movie at line {line_num}: {e}")  # bad field values

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_movies_from_json(self, filepath: str) -> List[MovieRecord]:
		"""Load movies from a JSON file holding one array of movie objects."""
		filepath = Path(filepath)
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")
		with open(filepath, 'r', encoding='utf-8') as f:
			rows = json.load(f)
		if not isinstance(rows, list):
			raise ValueError(f"Expected a JSON array of movies in {filepath}")

		movies = self.parse_movies(rows)
		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")
		return movies

	def parse_movies(self, rows: Iterable[Dict[str, Any]]) -> List[MovieRecord]:
		"""Convert in-memory rows, skipping the ones that cannot be parsed."""
		movies = []
		for position, row in enumerate(rows):
			try:
				movies.append(self.parse_movie(row))
			except (ValueError, TypeError, AttributeError, OverflowError) as e:
				logger.warning(f"[DataLoader] Skipping movie at position {position}: {e}")
		return movies

	def parse_movie(self, data: Dict[str, Any]) -> MovieRecord:
		"""
		Convert a raw dictionary into a MovieRecord.
		Accepts a few alternative field names and fills safe defaults.
		"""
		movie_id = str(data.get('id', '')).strip()  # ensure ID is string
		if not movie_id:
			raise ValueError("Movie record has no 'id'")

		# Lists may arrive as real lists or comma-separated strings
		genres = self._parse_comma_separated(data.get('genre', data.get('genres')))
		actors = self._parse_comma_separated(data.get('actors', data.get('cast')))

		return MovieRecord(
			id=movie_id,
			title=str(data.get('title') or '').strip(),  # display title kept as-is
			year=int(data.get('year') or 0),  # int year or 0
			genres=self._dedupe([self._normalize_genre(g) for g in genres]),  # canonical genres
			rating=float(data.get('rating') or 0.0),  # 0..10
			director=str(data.get('director') or '').strip(),
			actors=actors,
			description=str(data.get('description') or data.get('overview') or '').strip(),
			poster=data.get('poster') or data.get('poster_url'),  # prefer 'poster' then 'poster_url'
			duration=int(data.get('duration') or data.get('runtime') or 0),  # minutes
			language=str(data.get('language') or '').strip(),
			popularity=float(data.get('popularity') or 0.0),  # 0..100
		)

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item]
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]
		return []  # any other type becomes empty

	def _normalize_genre(self, genre: str) -> str:
		"""
		Map a raw genre to its catalog form using synonyms; otherwise keep it trimmed.
		"""
		genre_lower = genre.strip().lower()  # prepare for lookup
		if genre_lower in self.genre_synonyms:
			return self.genre_synonyms[genre_lower]
		return genre.strip()

	@staticmethod
	def _dedupe(values: List[str]) -> List[str]:
		# ordered set: first occurrence wins, empty tags dropped
		seen = set()
		unique = []
		for value in values:
			if value and value not in seen:
				seen.add(value)
				unique.append(value)
		return unique

	def get_all_genres(self, movies: List[MovieRecord]) -> List[str]:
		"""Return a sorted list of all unique genres in the catalog."""
		genres = set()
		for movie in movies:
			genres.update(movie.genres)
		return sorted(genres)

	def get_all_languages(self, movies: List[MovieRecord]) -> List[str]:
		"""Return a sorted list of all unique languages in the catalog."""
		return sorted({movie.language for movie in movies if movie.language})
