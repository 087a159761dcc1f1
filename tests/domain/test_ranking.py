import pytest

from scene_memory.domain.models.movie_candidate import Confidence
from scene_memory.domain.services.ranking import (
    MAX_CANDIDATES,
    SYNOPSIS_PLACEHOLDER,
    confidence_for_position,
    rank_candidates,
    release_year,
    to_movie_candidate,
)
from tests.factories import search_result_factory


@pytest.mark.parametrize(
    "index,expected",
    [(0, Confidence.HIGH), (1, Confidence.MEDIUM), (2, Confidence.LOW), (3, Confidence.LOW), (10, Confidence.LOW)],
)
def test_confidence_is_positional(index, expected):
    assert confidence_for_position(index) == expected


def test_confidence_wire_values():
    assert [c.value for c in Confidence] == ["Alta", "Média", "Baixa"]


@pytest.mark.parametrize(
    "release_date,expected",
    [("1988-07-15", "1988"), ("2001", "2001"), ("", "N/A"), (None, "N/A"), ("soon", "N/A"), ("19", "N/A")],
)
def test_release_year(release_date, expected):
    assert release_year(release_date) == expected


def test_to_movie_candidate_maps_fields():
    result = search_result_factory.create_result(title="Matrix", release_date="1999-03-31", poster_path="/m.jpg")

    movie = to_movie_candidate(result, 0)

    assert movie.title == "Matrix"
    assert movie.year == "1999"
    assert movie.synopsis == result.overview
    assert movie.poster_path == "/m.jpg"
    assert movie.confidence == Confidence.HIGH


def test_to_movie_candidate_fills_missing_fields():
    result = search_result_factory.create_result(release_date=None, overview="", poster_path=None)

    movie = to_movie_candidate(result, 2)

    assert movie.year == "N/A"
    assert movie.synopsis == SYNOPSIS_PLACEHOLDER
    assert movie.poster_path is None
    assert movie.confidence == Confidence.LOW


def test_rank_candidates_keeps_order_and_caps():
    results = search_result_factory.create_results(["A", "B", "C", "D", "E", "F"])

    movies = rank_candidates(results)

    assert len(movies) == MAX_CANDIDATES
    assert [m.title for m in movies] == ["A", "B", "C", "D"]
    assert [m.confidence for m in movies] == [Confidence.HIGH, Confidence.MEDIUM, Confidence.LOW, Confidence.LOW]


def test_rank_candidates_drops_repeated_movies():
    results = [
        search_result_factory.create_result(id=10, title="Heat"),
        search_result_factory.create_result(id=10, title="Heat"),
        search_result_factory.create_result(id=None, title="Untracked"),
        search_result_factory.create_result(id=11, title="Ronin"),
    ]

    movies = rank_candidates(results)

    assert [m.title for m in movies] == ["Heat", "Untracked", "Ronin"]
    assert movies[1].confidence == Confidence.MEDIUM


def test_rank_candidates_empty():
    assert rank_candidates([]) == []
