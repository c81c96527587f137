"""
Product Domain Routes
=====================
"""

from .product_routes import router as product_router

__all__ = ['product_router']
