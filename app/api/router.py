"""
Router registration for the board game API.
"""
from fastapi import FastAPI

from app.api import games, stats, tournaments


def include_routers(app: FastAPI) -> None:
    """Include all API routers with the FastAPI application."""
    app.include_router(games.router, prefix="/api/v1", tags=["games"])
    app.include_router(stats.router, prefix="/api/v1", tags=["stats"])
    app.include_router(tournaments.router, prefix="/api/v1", tags=["tournaments"])
