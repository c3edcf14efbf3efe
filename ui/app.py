"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import BaseShortIdError, ClockError, InvalidLength, OrderedUnavailable
from core.health import (
    HealthChecker,
    check_clock,
    check_entropy,
    create_issuer_check,
)
from identifiers import shortid
from identifiers.issuer import IdIssuer
from internal.logging import get_logger, parse_level, StructuredLogger
from utils.crash import create_async_handler
from ui.routes import api, health, ids

_ERROR_STATUS = {
    InvalidLength: 400,
    OrderedUnavailable: 404,
    ClockError: 503,
}


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    shortid.configure(precision=config.ids.precision, ordered_enabled=config.ids.ordered)

    issuer = IdIssuer(config=config.ids)
    health_checker = HealthChecker()
    health_checker.register("entropy", check_entropy, critical=True)
    health_checker.register("clock", check_clock, critical=config.ids.ordered)
    health_checker.register("issuer", create_issuer_check(issuer), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0",
                             precision=config.ids.precision.value, ordered=config.ids.ordered)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        yield
        logger_instance.info("Application shutdown complete", issued=issuer.get_stats()["total_issued"])

    app = FastAPI(
        title="shortid",
        version="1.0.0",
        description="short URL-safe random and time-ordered ids",
        lifespan=lifespan,
    )

    @app.exception_handler(BaseShortIdError)
    async def shortid_error(request: Request, exc: BaseShortIdError):
        status_code = next((code for kind, code in _ERROR_STATUS.items() if isinstance(exc, kind)), 500)
        return JSONResponse(content=exc.to_dict(), status_code=status_code)

    ids.init(issuer)
    api.init(issuer)
    health.init(issuer, health_checker)

    app.include_router(ids.router)
    # ordered ids are a capability; when switched off the route does not exist
    if config.ids.ordered:
        app.include_router(ids.ordered_router)
    app.include_router(api.router)
    app.include_router(health.router)

    app.state.issuer = issuer
    app.state.health_checker = health_checker
    return app
