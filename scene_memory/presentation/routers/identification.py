from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scene_memory.applications.interfaces.dtos.identification import (
    IdentifyMovieErrorResponse,
    IdentifyMovieRequest,
    IdentifyMovieResponse,
)
from scene_memory.applications.services.identification_dto_mapper import IdentificationDtoMapper
from scene_memory.domain.exceptions import ConfigurationError, UpstreamSearchError, ValidationError
from scene_memory.domain.ports.services.movie_identification_service_port import MovieIdentificationServicePort
from scene_memory.infrastructure.config.dependencies import get_movie_identification_service
from scene_memory.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/identify-movie", tags=["identification"])


def error_response(status_code: int, error: Exception) -> JSONResponse:
    body = IdentificationDtoMapper.to_error_response(error)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies with the identification error shape"""
    logger.warning(f"Malformed identification request: {exc.errors()}")
    return error_response(HTTPStatus.BAD_REQUEST, ValidationError("Request body must be a JSON object with a description"))


@router.post(
    "",
    response_model=IdentifyMovieResponse,
    responses={
        400: {"model": IdentifyMovieErrorResponse},
        500: {"model": IdentifyMovieErrorResponse},
    },
)
async def identify_movie(
    request: IdentifyMovieRequest,
    identification_service: Annotated[MovieIdentificationServicePort, Depends(get_movie_identification_service)],
):
    """Guess which movie a remembered scene belongs to"""
    try:
        result = await identification_service.identify(request.description)
        return IdentificationDtoMapper.to_identify_movie_response(result)
    except ValidationError as e:
        logger.warning(f"Bad identification request: {e}")
        return error_response(HTTPStatus.BAD_REQUEST, e)
    except (ConfigurationError, UpstreamSearchError) as e:
        logger.error(f"Identification failed: {e}")
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    except Exception as e:
        logger.exception("Unhandled error identifying movie")
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, e)


@router.get("/health")
async def identification_health_check():
    """Health check endpoint for the identification service"""
    return {
        "status": "healthy",
        "service": "movie-identification",
        "message": "Movie identification service is operational",
    }
