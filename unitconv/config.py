"""Centralized configuration constants for the application.

Environment-driven settings are read once at import. Numeric limits used by
the conversion core are grouped in the config classes below.
"""

from __future__ import annotations

import os

# Environment mode
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
IS_PRODUCTION = ENVIRONMENT == "production"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# CORS configuration
# In production, restrict to specific origins; in development, allow localhost
_cors_origins_env = os.environ.get("CORS_ORIGINS", "")
if _cors_origins_env:
    CORS_ORIGINS: list[str] = [origin.strip() for origin in _cors_origins_env.split(",")]
elif IS_PRODUCTION:
    CORS_ORIGINS = []
else:
    CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]

# HTTP server bind address for ``python -m unitconv serve``
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", 8000))


class ConversionConfig:
    """Limits applied to every conversion input."""

    # Inputs are bounded to [CLAMP_MIN, CLAMP_MAX] after validation
    CLAMP_MIN = -1_000_000.0
    CLAMP_MAX = 1_000_000.0

    ABSOLUTE_ZERO_CELSIUS = -273.15
    KELVIN_OFFSET = 273.15


class MenuConfig:
    """Constants for the interactive console menu."""

    RESULT_DECIMALS = 2
    EXIT_OPTION = 5
