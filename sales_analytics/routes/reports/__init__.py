"""
Reporting Routes
================
"""

from .report_routes import router as report_router

__all__ = ['report_router']
