"""
Tests for the console entry point in scripts/recommend.py.
Run: pytest tests/test_recommend_script.py
"""

import json

from scripts.recommend import main


def test_missing_path_argument_returns_usage_error():
	assert main([]) == 2


def test_unknown_catalog_returns_usage_error(tmp_path):
	assert main([str(tmp_path / 'missing.jsonl')]) == 2


def test_runs_against_a_catalog(tmp_path):
	rows = [
		{'id': 'a', 'title': 'A', 'year': 2010, 'genre': ['Drama'], 'rating': 8.0, 'duration': 100, 'popularity': 10},
		{'id': 'b', 'title': 'B', 'year': 2015, 'genre': ['Comedy'], 'rating': 7.0, 'duration': 90, 'popularity': 20},
	]
	path = tmp_path / 'movies.jsonl'
	path.write_text('\n'.join(json.dumps(row) for row in rows) + '\n', encoding='utf-8')

	assert main([str(path), 'Drama']) == 0
