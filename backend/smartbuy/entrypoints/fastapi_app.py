# smartbuy/entrypoints/fastapi_app.py
from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import settings
from ..domain.errors import ScoringError
from .api.routers import health, score

log = logging.getLogger(__name__)


def _validation_field(loc: tuple) -> str:
    # ("body", "buyerProfile", "maxPrice") -> "buyerProfile.maxPrice"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def _status_label(code: int) -> str:
    # 401 -> "401 UNAUTHORIZED", same shape as the 400 body
    try:
        return f"{code} {HTTPStatus(code).name}"
    except ValueError:
        return str(code)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ScoringError)
    async def _scoring_error(request: Request, exc: ScoringError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": _status_label(400), "message": exc.reason},
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": _status_label(exc.status_code), "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors: dict[str, str] = {}
        for err in exc.errors():
            errors[_validation_field(tuple(err.get("loc", ())))] = err.get("msg", "invalid")
        return JSONResponse(status_code=400, content=errors)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": "An unexpected error occurred"},
        )


def create_app() -> FastAPI:
    app = FastAPI(title="SmartBuy - House Fit Scoring")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(score.router)

    return app
