"""Main module for the finance dashboard API."""
import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from finance_dashboard import log_config
from finance_dashboard.config import Settings
from finance_dashboard.db import MemoryStore, seed_demo_data
from finance_dashboard.errors import DashboardError, ErrorMapper
from finance_dashboard.providers import HistoryGenerator, StaticQuoteProvider
from finance_dashboard.routers import (markets_router, portfolio_router,
                                       preferences_router, stocks_router,
                                       watchlist_router)
from finance_dashboard.services import (PortfolioService, PreferencesService,
                                        StocksService, WatchlistService)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create the store, seed the demo user and build services at startup."""
    settings: Settings = fastapi_app.state.settings

    store = MemoryStore()
    demo_user = seed_demo_data(store, with_samples=settings.seed_demo)

    quotes = StaticQuoteProvider()
    history = HistoryGenerator(quotes, rng=random.Random(settings.history_seed))

    fastapi_app.state.store = store
    fastapi_app.state.demo_user_id = demo_user.id
    fastapi_app.state.stocks_service = StocksService(quotes, history)
    fastapi_app.state.portfolio_service = PortfolioService(store, quotes)
    fastapi_app.state.watchlist_service = WatchlistService(store, quotes)
    fastapi_app.state.preferences_service = PreferencesService(store)
    logger.info("Dashboard ready for user '%s'", demo_user.username)

    yield

    logger.info("Dashboard shutting down")


async def handle_dashboard_error(request: Request, exc: DashboardError) -> JSONResponse:
    """Render a domain error as {"detail": ...} with the mapped status."""
    status_code, detail = request.app.state.error_mapper.to_http(exc)
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report invalid payloads and parameters as 400 rather than 422."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400, content={"detail": "Invalid request data", "errors": errors}
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app. Services are created when the lifespan starts."""
    fastapi_app = FastAPI(
        title="Finance Dashboard",
        description="Portfolio, watchlist and preferences over mocked market data",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings or Settings.from_env()
    fastapi_app.state.error_mapper = ErrorMapper()

    fastapi_app.add_exception_handler(DashboardError, handle_dashboard_error)
    fastapi_app.add_exception_handler(RequestValidationError, handle_validation_error)

    fastapi_app.include_router(stocks_router)
    fastapi_app.include_router(markets_router)
    fastapi_app.include_router(portfolio_router)
    fastapi_app.include_router(watchlist_router)
    fastapi_app.include_router(preferences_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for the `dashboard` script."""
    settings = app.state.settings
    log_config.setup(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
