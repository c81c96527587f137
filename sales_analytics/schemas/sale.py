"""
Sales Domain Schemas
====================

Schemas untuk Sale, SaleItem, Employee dan Customer
"""

from typing import List, Optional
from .base import BaseSchema, TimestampMixin
from .product import ProductSchema

class EmployeeSchema(BaseSchema):
    name: str

class CustomerSchema(BaseSchema):
    name: str
    phone: Optional[str] = None

class SaleItemSchema(BaseSchema):
    product_id: int
    quantity: int
    total_price: float
    product: Optional[ProductSchema] = None

class SaleSchema(BaseSchema, TimestampMixin):
    """Sale lengkap dengan items, employee dan customer"""
    total_amount: float
    total_cost: float = 0
    discount: float = 0
    custom_discount: Optional[float] = None
    custom_discount_type: Optional[str] = None
    payment_method: str
    employee_id: Optional[int] = None
    customer_id: Optional[int] = None
    employee: Optional[EmployeeSchema] = None
    customer: Optional[CustomerSchema] = None
    items: List[SaleItemSchema] = []
