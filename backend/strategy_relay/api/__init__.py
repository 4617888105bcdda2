"""
PURPOSE: API router initialization and exports for the Strategic Update Relay.

This module aggregates the API routers into a single api_router that is
included in the main FastAPI application.
"""

from fastapi import APIRouter

from strategy_relay.api.routes_webhook import router as webhook_router

# Create the main API router
api_router = APIRouter(prefix="/api", tags=["api"])

# Include all sub-routers
api_router.include_router(webhook_router, tags=["webhook"])

__all__ = ["api_router"]
