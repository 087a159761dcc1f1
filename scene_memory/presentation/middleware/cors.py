from http import HTTPStatus

from fastapi import Request, Response

from scene_memory.infrastructure.logging.logger import Logger
from scene_memory.presentation.routers.identification import error_response

logger = Logger.get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


async def cors_middleware(request: Request, call_next):
    """Answer pre-flight requests and attach CORS headers to every response"""
    if request.method == "OPTIONS":
        return Response(status_code=HTTPStatus.OK, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error serving {request.method} {request.url.path}")
        response = error_response(HTTPStatus.INTERNAL_SERVER_ERROR, e)
    response.headers.update(CORS_HEADERS)
    return response
