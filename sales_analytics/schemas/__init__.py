"""
Schemas Package
===============

Pydantic schemas untuk serialization dan validation
"""

from .base import BaseSchema, TimestampMixin

# ==================== PRODUCT DOMAIN ====================
from .product import (
    CategorySchema, ProductSchema, SoldProductSchema,
    ProductBatchSchema, ProductCodeLookupSchema,
)

# ==================== SALES DOMAIN ====================
from .sale import (
    EmployeeSchema, CustomerSchema, SaleItemSchema, SaleSchema,
)

# ==================== REPORTING ====================
from .report import (
    EmployeeSalesSchema, SalesReportSchema,
)

__all__ = [
    'BaseSchema', 'TimestampMixin',
    'CategorySchema', 'ProductSchema', 'SoldProductSchema',
    'ProductBatchSchema', 'ProductCodeLookupSchema',
    'EmployeeSchema', 'CustomerSchema', 'SaleItemSchema', 'SaleSchema',
    'EmployeeSalesSchema', 'SalesReportSchema',
]
