"""
Product Domain Services
=======================
"""

from .product_service import ProductService

__all__ = ['ProductService']
