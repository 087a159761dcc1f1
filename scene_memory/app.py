from http import HTTPStatus

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from scene_memory.applications.interfaces.dtos.message import Message
from scene_memory.infrastructure.logging.logger import setup_logging
from scene_memory.presentation.middleware.cors import cors_middleware
from scene_memory.presentation.routers import identification

setup_logging()

app = FastAPI(title="SceneMemory")

app.middleware("http")(cors_middleware)
app.add_exception_handler(RequestValidationError, identification.request_validation_exception_handler)

app.include_router(identification.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "SceneMemory is running"}
