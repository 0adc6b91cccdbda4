"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from starlette.exceptions import HTTPException as StarletteHTTPException  # noqa: E402

from wbcalc.api.routes import aircraft_profiles, calculations, engine, loading, system  # noqa: E402
from wbcalc.contracts.result import ApiResponse  # noqa: E402
from wbcalc.persistence.database import get_database  # noqa: E402
from wbcalc.persistence.seed import initialize  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and seed templates on startup."""
    db = get_database()
    seed = os.environ.get("WBCALC_SEED_TEMPLATES", "1") != "0"
    stats = initialize(db, seed=seed)
    logger.info(
        "Database ready at %s: %d profiles, %d calculations",
        db.path, stats["profiles"], stats["calculations"],
    )
    yield
    db.close()


app = FastAPI(
    title="Weight & Balance API",
    description="Aircraft weight and balance calculator",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------
# Uniform error envelope
# ------------------------------------------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.fail(str(exc.detail)).to_json(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content=ApiResponse.fail("Invalid request: " + "; ".join(problems)).to_json(),
    )


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=ApiResponse.fail("Internal server error").to_json())


app.include_router(aircraft_profiles.router, prefix="/api")
app.include_router(calculations.router, prefix="/api")
app.include_router(engine.router, prefix="/api")
app.include_router(loading.router, prefix="/api")
app.include_router(system.router, prefix="/api")
