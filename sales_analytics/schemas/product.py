"""
Product Domain Schemas
======================

Schemas untuk Category, Product dan hasil lookup per product code
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date
from .base import BaseSchema, TimestampMixin

class CategorySchema(BaseSchema):
    name: str

class ProductSchema(BaseSchema, TimestampMixin):
    """Schema untuk Product (satu batch)"""
    name: str
    code: str
    batch_no: Optional[str] = None
    total_quantity: int = 0
    stock_quantity: int = 0
    purchase_date: Optional[date] = None
    expire_date: Optional[date] = None
    category_id: Optional[int] = None
    category: Optional[CategorySchema] = None

class SoldProductSchema(ProductSchema):
    """Product beserta quantity terjual di dalam window report"""
    sold_quantity: int = 0

class ProductBatchSchema(BaseModel):
    """Projection batch untuk lookup by code"""
    batch_no: Optional[str] = None
    total_quantity: int = 0
    stock_quantity: int = 0
    expire_date: Optional[date] = None
    purchase_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)

class ProductCodeLookupSchema(BaseModel):
    """Response untuk search by code"""
    records: List[ProductBatchSchema] = Field(default_factory=list)
    total_quantity: int = 0
    remaining_quantity: int = 0
