"""FastAPI application exposing the database tools over HTTP."""

from .app import create_app

__all__ = ["create_app"]
