"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def get_allowed_origins(configured: list[str] | None = None) -> list[str]:
    """Get list of allowed CORS origins.

    Args:
        configured: Origins from settings. Empty or missing means every origin.

    Returns:
        List of allowed origin URLs, ``["*"]`` when any origin is permitted
    """
    if not configured or "*" in configured:
        return ["*"]

    # Deduplicate while preserving order
    return list(dict.fromkeys(origin.rstrip("/") for origin in configured))


def get_cors_headers(origin: str | None, configured: list[str] | None = None) -> dict[str, str]:
    """Get CORS headers for a given origin.

    Args:
        origin: The origin from the request header
        configured: Origins from settings

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin:
        return {}

    allowed_origins = get_allowed_origins(configured)

    if allowed_origins == ["*"]:
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "*",
            "Access-Control-Allow-Headers": "*",
        }
    if origin in allowed_origins:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": "*",
            "Access-Control-Allow-Headers": "*",
            "Vary": "Origin",
        }
    return {}


def setup_middleware(app: FastAPI, origins: list[str] | None = None) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        origins: Allowed CORS origins from settings
    """
    allowed_origins = get_allowed_origins(origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s", allowed_origins)
