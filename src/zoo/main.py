from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from zoo.db.session import shutdown
from zoo.dependencies import DB
from zoo.exceptions import ArgumentError, DomainError, NotFoundError, ValidationError
from zoo.logging import get_logger
from zoo.middleware import RequestIDMiddleware
from zoo.routers.animal import router as animal_router
from zoo.schemas.error import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close pooled database connections on shutdown."""
    yield
    await shutdown()


app = FastAPI(title="Zoo animals", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(animal_router)


def _error_json(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=_error_json("not_found", exc.message))


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Return 422 for animals the manager rejected."""
    logger.warning("invalid_animal", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=422, content=_error_json("validation_error", exc.message))


@app.exception_handler(ArgumentError)
async def argument_error_handler(request: Request, exc: ArgumentError) -> JSONResponse:
    """Return 400 for blank catalog numbers or types."""
    logger.warning("invalid_argument", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("invalid_argument", exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for any other domain-level violation."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("domain_error", exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions (store faults included) and return a safe response.

    The traceback goes to the log with the request_id; the client only sees
    a generic message.
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check: 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
