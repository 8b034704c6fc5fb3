import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todoserver.config import Settings
from todoserver.errors import PersistenceFailure, TodoConflict, TodoNotFound
from todoserver.repositories.base import TodoStore
from todoserver.repositories.factory import build_store
from todoserver.routers import todo_router, toggle_router

logger = logging.getLogger(__name__)


def create_app(store: TodoStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the service around one shared store.

    The store is chosen here, once; routes only ever see the ``TodoStore``
    interface through ``app.state.store``.
    """
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.create_schema()
        logger.info("todo store ready (%s)", type(store).__name__)
        yield
        await store.close()

    app = FastAPI(title="Todo Server", lifespan=lifespan)
    app.state.store = store
    app.state.settings = settings

    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])
    app.include_router(toggle_router.router, prefix="/toggle", tags=["Todos"])
    _register_exception_handlers(app, strict=settings.strict_status_codes)

    # Root liveness
    @app.get("/", response_class=Response)
    async def read_root():
        return Response(status_code=200)

    return app


def _register_exception_handlers(app: FastAPI, *, strict: bool) -> None:
    not_found_status = 404 if strict else 400
    conflict_status = 409 if strict else 400

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(TodoNotFound)
    async def todo_not_found(request: Request, exc: TodoNotFound):
        return JSONResponse(status_code=not_found_status, content={"detail": str(exc)})

    @app.exception_handler(TodoConflict)
    async def todo_conflict(request: Request, exc: TodoConflict):
        return JSONResponse(status_code=conflict_status, content={"detail": str(exc)})

    @app.exception_handler(PersistenceFailure)
    async def persistence_failure(request: Request, exc: PersistenceFailure):
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "persistence failure"})
