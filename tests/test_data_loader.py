"""
Tests for DataLoader: JSONL/JSON ingestion, field aliases, and genre normalization.
Run: pytest tests/test_data_loader.py
"""

import json

import pytest

from cinedex.data_loader import DataLoader


ROWS = [
	{
		'id': 'm1', 'title': 'The Last Journey', 'year': 2019, 'genre': ['Drama', 'sci fi'],
		'rating': 8.5, 'director': 'Jane Doe', 'actors': ['A', 'B'], 'description': 'A trip.',
		'poster': 'https://example.org/m1.jpg', 'duration': 130, 'language': 'English', 'popularity': 90,
	},
	{
		'id': 2, 'title': 'Dil Se', 'year': '2005', 'genres': 'Romance, Drama, Romance',
		'rating': '7.2', 'cast': 'C, D', 'overview': 'Love story.', 'runtime': 160,
		'language': 'Hindi', 'popularity': 55.5,
	},
]


def write_jsonl(path, lines):
	path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
	return path


def test_load_movies_from_jsonl(tmp_path):
	path = write_jsonl(tmp_path / 'movies.jsonl', [json.dumps(row) for row in ROWS])
	loader = DataLoader()

	movies = loader.load_movies_from_jsonl(str(path))

	assert [m.id for m in movies] == ['m1', '2']
	first, second = movies
	assert first.genres == ['Drama', 'Sci-Fi']
	assert first.rating == 8.5
	assert first.poster == 'https://example.org/m1.jpg'
	assert second.year == 2005
	assert second.rating == 7.2
	assert second.genres == ['Romance', 'Drama']
	assert second.actors == ['C', 'D']
	assert second.description == 'Love story.'
	assert second.duration == 160
	assert second.poster is None


def test_jsonl_skips_malformed_lines(tmp_path):
	lines = [json.dumps(ROWS[0]), '{not json', '', json.dumps({'title': 'no id'}), json.dumps({'id': 'x', 'year': 'soon'})]
	path = write_jsonl(tmp_path / 'movies.jsonl', lines)

	movies = DataLoader().load_movies_from_jsonl(str(path))

	assert [m.id for m in movies] == ['m1']


def test_missing_file_raises(tmp_path):
	loader = DataLoader()
	with pytest.raises(FileNotFoundError):
		loader.load_movies_from_jsonl(str(tmp_path / 'absent.jsonl'))
	with pytest.raises(FileNotFoundError):
		loader.load_movies_from_json(str(tmp_path / 'absent.json'))


def test_load_movies_from_json_array(tmp_path):
	path = tmp_path / 'movies.json'
	path.write_text(json.dumps(ROWS), encoding='utf-8')

	movies = DataLoader().load_movies_from_json(str(path))

	assert [m.title for m in movies] == ['The Last Journey', 'Dil Se']


def test_json_must_be_array(tmp_path):
	path = tmp_path / 'movies.json'
	path.write_text(json.dumps({'id': 'm1'}), encoding='utf-8')

	with pytest.raises(ValueError):
		DataLoader().load_movies_from_json(str(path))


def test_parse_movie_defaults_and_errors():
	loader = DataLoader()
	movie = loader.parse_movie({'id': 'bare'})

	assert movie.title == ''
	assert movie.genres == []
	assert movie.rating == 0.0
	assert movie.duration == 0
	assert movie.popularity == 0.0

	with pytest.raises(ValueError):
		loader.parse_movie({'title': 'anonymous'})


def test_catalog_listings():
	loader = DataLoader()
	movies = loader.parse_movies(ROWS + [{'title': 'skipped'}])

	assert len(movies) == 2
	assert loader.get_all_genres(movies) == ['Drama', 'Romance', 'Sci-Fi']
	assert loader.get_all_languages(movies) == ['English', 'Hindi']


def test_overflowing_numbers_are_skipped(tmp_path):
	# json accepts 1e400 as float('inf'); int(inf) raises OverflowError
	lines = [json.dumps(dict(ROWS[0], id='ok')), '{"id": "x", "year": 1e400}', '{"id": "y", "duration": 1e400}']
	path = write_jsonl(tmp_path / 'movies.jsonl', lines)

	assert [m.id for m in DataLoader().load_movies_from_jsonl(str(path))] == ['ok']
	assert [m.id for m in DataLoader().parse_movies([{'id': 'bad', 'year': float('inf')}, {'id': 'ok'}])] == ['ok']
