from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitconv import __version__
from unitconv.config import CORS_ORIGINS, LOG_LEVEL
from unitconv.dependencies import ConversionRegistryDep, get_conversion_registry

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


HEALTH_PATH = "/api/health"


class _HealthCheckFilter(logging.Filter):
    """Drop uvicorn access records for successful ``HEALTH_PATH`` requests.

    Failed health checks stay in the log.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access log args: (client_addr, method, path, http_version, status_code)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 5:
            return True
        path, status = args[2], args[4]
        return not (path == HEALTH_PATH and status == 200)


def _install_health_check_filter() -> None:
    """Attach the filter to uvicorn's access logger and its handlers, once each."""
    access_logger = logging.getLogger("uvicorn.access")
    for target in (access_logger, *access_logger.handlers):
        if not any(isinstance(f, _HealthCheckFilter) for f in target.filters):
            target.addFilter(_HealthCheckFilter())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the registry up front so the first request does not pay for it."""
    _install_health_check_filter()
    registry = get_conversion_registry()
    logger.info("Unit Converter ready. %d conversions registered.", len(registry))
    yield


app = FastAPI(title="Unit Converter", version=__version__, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (imported after app initialization to avoid circular imports)
from unitconv.routes.conversions import router as conversions_router  # noqa: E402

app.include_router(conversions_router)


@app.get(HEALTH_PATH)
def health_check(registry: ConversionRegistryDep) -> dict:
    """Health check endpoint with the number of registered conversions."""
    return {"status": "ok", "conversions": len(registry)}
