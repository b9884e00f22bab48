"""Command line interface package."""
from .main import app

__all__ = ["app"]
