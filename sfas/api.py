"""HTTP API for SFAS.

Thin FastAPI adapter over the stores: it decodes bodies into entities,
calls one store operation per request, and encodes the result. The
database is opened when the app starts and closed when it stops.
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sfas import log_config
from sfas.config import AppConfig, get_config
from sfas.db.bonus_store import BonusStore
from sfas.db.connection import open_database
from sfas.db.investment_store import InvestmentStore
from sfas.db.settings_store import SettingsStore
from sfas.models import Bonus, Investment, Settings
from sfas.schemas import (
    BonusIn,
    BonusOut,
    InvestmentIn,
    InvestmentOut,
    MessageOut,
    SettingsIn,
    SettingsOut,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

router = APIRouter(prefix=API_PREFIX)


def _investments(request: Request) -> InvestmentStore:
    return request.app.state.investments


def _bonuses(request: Request) -> BonusStore:
    return request.app.state.bonuses


def _settings(request: Request) -> SettingsStore:
    return request.app.state.settings


@router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Investments ──


@router.get("/investments", response_model=list[InvestmentOut], tags=["investments"])
def list_investments(request: Request) -> list[Investment]:
    return _investments(request).list_all()


@router.post(
    "/investments",
    response_model=MessageOut,
    status_code=status.HTTP_201_CREATED,
    tags=["investments"],
)
def create_investment(body: InvestmentIn, request: Request) -> MessageOut:
    new_id = _investments(request).create(body.to_entity())
    return MessageOut(message="Investment created successfully", id=new_id)


@router.put(
    "/investments/{investment_id}",
    response_model=MessageOut,
    response_model_exclude_none=True,
    tags=["investments"],
)
def update_investment(
    investment_id: int, body: InvestmentIn, request: Request
) -> MessageOut:
    _investments(request).update(body.to_entity(investment_id))
    return MessageOut(message="Investment updated successfully")


@router.delete(
    "/investments/{investment_id}",
    response_model=MessageOut,
    response_model_exclude_none=True,
    tags=["investments"],
)
def delete_investment(investment_id: int, request: Request) -> MessageOut:
    _investments(request).delete(investment_id)
    return MessageOut(message="Investment deleted successfully")


# ── Bonuses ──


@router.get("/bonuses", response_model=list[BonusOut], tags=["bonuses"])
def list_bonuses(request: Request) -> list[Bonus]:
    return _bonuses(request).list_all()


@router.post(
    "/bonuses",
    response_model=MessageOut,
    status_code=status.HTTP_201_CREATED,
    tags=["bonuses"],
)
def create_bonus(body: BonusIn, request: Request) -> MessageOut:
    new_id = _bonuses(request).create(body.to_entity())
    return MessageOut(message="Bonus created successfully", id=new_id)


@router.put(
    "/bonuses/{bonus_id}",
    response_model=MessageOut,
    response_model_exclude_none=True,
    tags=["bonuses"],
)
def update_bonus(bonus_id: int, body: BonusIn, request: Request) -> MessageOut:
    _bonuses(request).update(body.to_entity(bonus_id))
    return MessageOut(message="Bonus updated successfully")


@router.delete(
    "/bonuses/{bonus_id}",
    response_model=MessageOut,
    response_model_exclude_none=True,
    tags=["bonuses"],
)
def delete_bonus(bonus_id: int, request: Request) -> MessageOut:
    _bonuses(request).delete(bonus_id)
    return MessageOut(message="Bonus deleted successfully")


# ── Settings ──


@router.get("/settings", response_model=SettingsOut, tags=["settings"])
def get_settings(request: Request) -> Settings:
    return _settings(request).get()


@router.put(
    "/settings",
    response_model=MessageOut,
    response_model_exclude_none=True,
    tags=["settings"],
)
def update_settings(body: SettingsIn, request: Request) -> MessageOut:
    _settings(request).update(body.to_entity())
    return MessageOut(message="Settings updated successfully")


async def _storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the API application.

    Args:
        config: Settings to run with. Defaults to :func:`get_config`.

    Returns:
        FastAPI app whose lifespan owns the database connection.

    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        with open_database(config.DB_PATH) as conn:
            app.state.investments = InvestmentStore(conn)
            app.state.bonuses = BonusStore(
                conn, round_amounts=config.ROUND_BONUS_AMOUNTS
            )
            app.state.settings = SettingsStore(conn)
            logger.info("SFAS API serving %s", config.DB_PATH)
            yield
            logger.info("SFAS API shutdown")

    app = FastAPI(title="SFAS API", lifespan=lifespan)

    origins = config.CORS_ORIGINS_LIST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # wildcard + credentials is not legal CORS
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(sqlite3.Error, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(router)
    return app


def serve(argv: list[str] | None = None) -> None:
    """Run the API under uvicorn."""
    config = get_config()
    parser = argparse.ArgumentParser(description="SFAS HTTP API")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument("--db", default=str(config.DB_PATH), help="database file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    log_config.setup(verbose=args.verbose, level=config.LOG_LEVEL)
    config = config.model_copy(
        update={
            "HOST": args.host,
            "PORT": args.port,
            "DB_PATH": Path(args.db).expanduser(),
        }
    )
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    serve()
