"""
Run the recommendation pipeline against a catalog file.

This script:
1) Loads movies from the given JSONL catalog
2) Builds the recommendation engine indices
3) Runs a recommendation with default preferences and weights
4) Logs the serialized response and engine statistics

Usage:
    python -m scripts.recommend path/to/movies.jsonl [Genre ...]

The catalog path is required: one JSON object per line, see cinedex.data_loader for accepted fields.
"""

import sys  # command-line arguments
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from cinedex.data_loader import DataLoader  # catalog ingestion
from cinedex.models import UserPreferences  # recommendation filters
from cinedex.recommendation_engine import RecommendationEngine  # indices and pipeline
from cinedex.schemas import RecommendationResponse  # JSON-ready payload

USAGE = "Usage: python -m scripts.recommend path/to/movies.jsonl [Genre ...]"


def main(argv=None) -> int:
	argv = sys.argv[1:] if argv is None else argv
	if not argv:
		logger.error(f"[Script] Missing catalog path. {USAGE}")
		return 2

	data_path = Path(argv[0])  # input dataset
	genres = argv[1:]  # optional genre preferences
	if not data_path.is_file():
		logger.error(f"[Script] Catalog not found: {data_path}. {USAGE}")
		return 2

	# Headline banner for visibility in console
	logger.info("[Script] " + "=" * 60)
	logger.info("[Script] Movie Recommendations")
	logger.info("[Script] " + "=" * 60)

	# 1) Load data
	logger.info("[Script] [1/3] Loading movies...")
	loader = DataLoader()
	movies = loader.load_movies_from_jsonl(str(data_path))
	logger.info(f"[Script] [OK] Loaded {len(movies)} movies across {len(loader.get_all_genres(movies))} genres")

	# 2) Build indices
	logger.info("[Script] [2/3] Building engine indices...")
	t0 = time.time()
	engine = RecommendationEngine(movies)
	logger.info(f"[Script] [OK] Engine ready in {time.time() - t0:.2f}s")

	# 3) Recommend
	logger.info("[Script] [3/3] Generating recommendations...")
	result = engine.get_recommendations(UserPreferences(genres=genres), limit=12)
	for step in result.steps:
		logger.info(f"[Script]   Step {step.step} [{step.data_structure}] {step.description}: {step.details}")
	for rank, item in enumerate(result.recommendations, 1):
		logger.info(f"[Script]   {rank}. [{item.score:.3f}] {item.movie.title} ({item.movie.year}) - {', '.join(item.movie.genres[:3])}")

	response = RecommendationResponse.from_result(result)
	logger.debug(f"[Script] {response.model_dump_json(indent=2)}")
	logger.info(f"[Script] Engine stats: {engine.get_stats()}")
	logger.info("[Script] " + "=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke runner
