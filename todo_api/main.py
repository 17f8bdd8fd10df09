import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todo_api import __version__
from todo_api.config import Settings
from todo_api.database import Database, init_models
from todo_api.errors import TodoAPIError
from todo_api.logging_utils import configure_logging
from todo_api.routers import todo_router
from todo_api.schemas.todo import InvalidInput

logger = logging.getLogger(__name__)


async def todo_api_error_handler(request: Request, exc: TodoAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON bodies
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": InvalidInput.INVALID_DATA.value})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    database = Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_models(database, fail_fast=settings.fail_fast)
        yield
        await database.dispose()

    app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TodoAPIError, todo_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app
