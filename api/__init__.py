"""
API package.
HTTP endpoints over the merged source and the page handler.
"""

from .server import create_app, router

__all__ = ["create_app", "router"]
