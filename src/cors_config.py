"""CORS configuration for the FastAPI application."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Local front-end dev servers
DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:4200",
    "http://127.0.0.1:4200",
]


def _normalize_origin(origin: str) -> str:
    """Add https:// to an origin that has no scheme and drop any trailing slash."""
    origin = origin.strip().rstrip("/")
    if not origin.startswith(("http://", "https://")):
        return f"https://{origin}"
    return origin


def parse_origins(raw_origins: str | None) -> list[str]:
    """
    Split a comma-separated origin setting into normalized origins.

    Blank entries are skipped and duplicates are removed, keeping the first
    occurrence. Returns the development origins when nothing usable is given.
    """
    origins: list[str] = []
    for entry in (raw_origins or "").split(","):
        if not entry.strip():
            continue
        normalized = _normalize_origin(entry)
        if normalized not in origins:
            origins.append(normalized)
    return origins or list(DEV_ORIGINS)


def get_cors_config(allow_origins: str | None = None) -> dict[str, Any]:
    """
    Get the CORS middleware configuration.

    Args:
        allow_origins: Comma-separated production origins. When empty, the
                       development origins are allowed instead.

    Returns:
        Keyword arguments for CORSMiddleware
    """
    origins = parse_origins(allow_origins)
    logger.info(f"CORS allowed_origins setting is {origins}")

    return {
        "allow_origins": origins,
        "allow_credentials": True,
        "allow_methods": ["GET", "POST", "PUT", "DELETE"],
        "allow_headers": ["*"],
    }
