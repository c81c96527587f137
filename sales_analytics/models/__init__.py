"""
Sales Analytics Models Package
==============================

Database models untuk sales report dan inventory lookup.

Domain Structure:
- Core: Base model dan declarative base
- Product: Category dan Product (per batch)
- People: Employee dan Customer
- Sales: Sale dan SaleItem
"""

from .base import Base, BaseModel

from .product import (
    Category,
    Product,
)

from .people import (
    Employee,
    Customer,
)

from .sale import (
    Sale,
    SaleItem,
    DISCOUNT_FIXED,
    DISCOUNT_PERCENT,
)

__all__ = [
    # Core
    'Base', 'BaseModel',

    # Product domain
    'Category', 'Product',

    # People
    'Employee', 'Customer',

    # Sales domain
    'Sale', 'SaleItem', 'DISCOUNT_FIXED', 'DISCOUNT_PERCENT',
]
