# api/services/__init__.py
"""
API Services Package

Keeps screening logic out of the route handlers.
"""

from api.services.scan_service import ScanService, get_scan_service

__all__ = ["ScanService", "get_scan_service"]
