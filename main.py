"""ParentBoost API application entry point."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

import asyncpg
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.routes import (
    age_router, creator_router, diary_router, health_router,
    profiles_router, saved_router, strategies_router, uploads_router,
)
from app.services.catalog import StrategyCatalog
from app.services.database import close_pool, create_tables, init_pool
from app.services.errors import ProfileRequiredError, StorageError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool and prepare an empty strategy catalog."""
    await init_pool()
    await create_tables()
    logger.info("PostgreSQL pool initialized, tables created")

    # Loaded on first parent read, dropped after every strategy mutation
    app.state.strategy_catalog = StrategyCatalog()

    yield

    await close_pool()
    logger.info("ParentBoost API stopped")


app = FastAPI(
    title="ParentBoost API",
    description=(
        "Parenting support API: child profiles, an emotion-tagged diary and an "
        "age-targeted strategy library with saved / worked tracking."
    ),
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ProfileRequiredError)
async def profile_required_handler(request: Request, exc: ProfileRequiredError) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=409, content={"detail": str(exc), "code": "profile_required"})


@app.exception_handler(asyncpg.UniqueViolationError)
async def unique_violation_handler(request: Request, exc: asyncpg.UniqueViolationError) -> JSONResponse:
    logger.info("%s %s: duplicate record (%s)", request.method, request.url.path, exc.constraint_name)
    return JSONResponse(status_code=409, content={"detail": "Record already exists", "code": "duplicate"})


@app.exception_handler(asyncpg.PostgresError)
async def database_error_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    logger.error("%s %s: database error: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Database operation failed", "code": "database_error"})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": f"Storage {exc.action} failed", "code": "storage_error"})


app.include_router(health_router)
app.include_router(age_router)
app.include_router(profiles_router)
app.include_router(diary_router)
app.include_router(strategies_router)
app.include_router(saved_router)
app.include_router(creator_router)
app.include_router(uploads_router)
