"""
Shared fixtures for the engine and data structure tests.
"""

import pytest

from cinedex.models import MovieRecord
from cinedex.recommendation_engine import RecommendationEngine


def make_movie(movie_id, **overrides):
	"""Build a MovieRecord with neutral defaults for every field not under test."""
	fields = dict(
		id=movie_id,
		title=f"Movie {movie_id}",
		year=2020,
		genres=['Drama'],
		rating=7.0,
		director='jane doe',
		actors=['john smith'],
		description='a film',
		poster=None,
		duration=120,
		language='English',
		popularity=50.0,
	)
	fields.update(overrides)
	return MovieRecord(**fields)


@pytest.fixture
def movie_factory():
	return make_movie


@pytest.fixture
def catalog():
	return [
		make_movie('m1', title='The Last Journey', year=2019, genres=['Drama', 'Adventure'], rating=8.5, popularity=90.0, duration=130),
		make_movie('m2', title='Funny Business', year=2021, genres=['Comedy'], rating=6.5, popularity=40.0, duration=95),
		make_movie('m3', title='Silent Storm', year=1998, genres=['Drama', 'Thriller'], rating=7.8, popularity=65.0, duration=110),
		make_movie('m4', title='Dil Se', year=2005, genres=['Romance', 'Drama'], rating=7.2, popularity=55.0, duration=160, language='Hindi'),
		make_movie('m5', title='Hidden Laughs', year=2012, genres=['Comedy', 'Family'], rating=5.4, popularity=30.0, duration=88),
		make_movie('m6', title='Iron Storm', year=1965, genres=['War'], rating=8.1, popularity=20.0, duration=200),
	]


@pytest.fixture
def engine(catalog):
	return RecommendationEngine(catalog, current_year=2024)
