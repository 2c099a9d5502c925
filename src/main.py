"""
Production Tracker Access Service

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import get_settings
from src.database import init_db, close_db
from src.api.v1 import router as api_v1_router
from src.api.middleware.request_id import RequestIdMiddleware, REQUEST_ID_HEADER
from src.kernel.permissions.errors import AccessError
from src.schemas.common import ErrorResponse, HealthResponse
from src.logging_config import configure_logging, get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.
    
    Runs startup and shutdown tasks.
    """
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.project_name,
    description="""
    Project access resolution for production tracking.
    
    Every request on a project, episode, sequence, shot, asset or version is
    resolved to its owning project and checked against the caller's project
    role (viewer < contributor < owner). Global admins bypass project roles.
    
    Refusals are 403 responses with a `code` of either `permission_denied`
    (role too low) or `entity_unresolvable` (no project reachable).
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# add_middleware stacks innermost-first: CORS added last so it wraps everything
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(request: Request, status_code: int, body: ErrorResponse) -> JSONResponse:
    headers = {}
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        headers[REQUEST_ID_HEADER] = req_id
        body.request_id = req_id
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(AccessError)
async def access_error_handler(request: Request, exc: AccessError):
    """Refused access, either a denied role or an unresolvable entity."""
    return _error_response(
        request,
        status.HTTP_403_FORBIDDEN,
        ErrorResponse(detail=exc.message, code=exc.code),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Attach the request id to 4xx/5xx responses."""
    response = _error_response(request, exc.status_code, ErrorResponse(detail=str(exc.detail)))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions, including store failures during a check."""
    logger.exception("Unhandled exception: %s", exc)
    detail = str(exc) if settings.debug else "Internal server error"
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(detail=detail, code=type(exc).__name__ if settings.debug else None),
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check application health."""
    return HealthResponse(version=settings.version)


app.include_router(api_v1_router, prefix=settings.api_v1_prefix)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
