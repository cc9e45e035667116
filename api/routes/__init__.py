"""
API Routes Package

Centralizes route management with explicit module imports.
"""

from api.routes import scan

__all__ = ["scan"]
