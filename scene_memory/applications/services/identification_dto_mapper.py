from scene_memory.applications.interfaces.dtos.identification import (
    IdentifyMovieErrorResponse,
    IdentifyMovieResponse,
    MovieCandidateResponse,
)
from scene_memory.domain.models.movie_candidate import IdentificationResult, MovieCandidate

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class IdentificationDtoMapper:
    """Maps identification domain models to the public response shape"""

    @staticmethod
    def to_movie_candidate_response(movie: MovieCandidate) -> MovieCandidateResponse:
        return MovieCandidateResponse(
            title=movie.title,
            year=movie.year,
            description=movie.synopsis,
            poster_path=movie.poster_path,
            confidence=movie.confidence.value,
        )

    @staticmethod
    def to_identify_movie_response(result: IdentificationResult) -> IdentifyMovieResponse:
        return IdentifyMovieResponse(
            movies=[IdentificationDtoMapper.to_movie_candidate_response(movie) for movie in result.movies]
        )

    @staticmethod
    def to_error_response(error: Exception) -> IdentifyMovieErrorResponse:
        return IdentifyMovieErrorResponse(error=str(error) or UNKNOWN_ERROR_MESSAGE, movies=[])
