"""
Main FastAPI application bootstrap.
Configures logging, middleware and routers.
"""
import logging

from fastapi import FastAPI

from costcalc.core.config import config
from costcalc.api.calculator import router as calculator_router
from costcalc.middleware.request_size_limiter import RequestSizeLimiterMiddleware


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Validate configuration on startup
try:
    config.validate()
except ValueError as error:
    raise RuntimeError(f"Configuration error: {error}") from error

logger.info(
    "Cost calculator starting with region=%s, currency=%s",
    config.DEFAULT_REGION,
    config.CURRENCY
)


app = FastAPI(
    title="Workload Cost Calculator",
    description="Monthly infrastructure cost estimation from workload sizing parameters",
)

app.add_middleware(RequestSizeLimiterMiddleware)

app.include_router(calculator_router)
