"""HTTP interface for procsheet."""

from .app import create_app

__all__ = ["create_app"]
