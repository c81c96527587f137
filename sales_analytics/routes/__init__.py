from .product import product_router
from .reports import report_router

__all__ = ['product_router', 'report_router']
