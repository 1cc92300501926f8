"""
Bookkeeping — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookkeeping.config import get_settings
from bookkeeping.logging_config import configure_logging
from bookkeeping.models.base import Base, SessionLocal, engine
from bookkeeping.services.account_service import AccountService
from bookkeeping.api.health import router as health_router
from bookkeeping.api.accounts import router as accounts_router
from bookkeeping.api.journal import router as journal_router
from bookkeeping.api.inventory import router as inventory_router
from bookkeeping.api.depreciation import router as depreciation_router

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create missing tables and seed the chart of accounts on first run."""
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        AccountService(db).seed_default_accounts()
        db.commit()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s %s", settings.APP_NAME, settings.APP_VERSION)
    init_db()
    yield
    engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry journal, inventory costing and depreciation",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error handling ---
# Malformed or incomplete payloads are client errors (400),
# store failures are server errors (500). Neither is retried.
# Every error body carries a readable "error" message next to "detail".

def _error_body(detail, message: str) -> dict:
    return {"detail": detail, "error": message}


def _summarize(errors) -> str:
    """Join field errors, e.g. "body.lines.0.debit: Input should be ..."."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in errors
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(jsonable_encoder(exc.detail), message),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=_error_body(
            jsonable_encoder(exc.errors()), _summarize(exc.errors())
        ),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_body("Database error", "Database error"),
    )


# Register routers
app.include_router(health_router)
app.include_router(accounts_router, prefix=settings.API_PREFIX)
app.include_router(journal_router, prefix=settings.API_PREFIX)
app.include_router(inventory_router, prefix=settings.API_PREFIX)
app.include_router(depreciation_router, prefix=settings.API_PREFIX)
