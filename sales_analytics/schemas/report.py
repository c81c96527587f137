"""
Report Schemas
==============

Payload untuk sales report yang dikirim ke presentation layer
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from .product import SoldProductSchema
from .sale import SaleSchema

class EmployeeSalesSchema(BaseModel):
    employee_name: str
    total_net_sales: float

class SalesReportSchema(BaseModel):
    """Sales report. Semua field uang sudah dibulatkan 2 desimal."""
    products: List[SoldProductSchema] = Field(default_factory=list)
    sales: List[SaleSchema] = Field(default_factory=list)

    total_sale_amount: float = 0
    total_cost: float = 0
    total_discount: float = 0
    total_custom_discount: float = 0
    net_profit: float = 0
    total_transactions: int = 0
    average_transaction_value: float = 0
    total_customers: int = 0

    # Raw input, dikembalikan apa adanya
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    category_sales: Dict[str, float] = Field(default_factory=dict)
    employee_sales_summary: Dict[str, EmployeeSalesSchema] = Field(default_factory=dict)
    payment_method_totals: Dict[str, float] = Field(default_factory=dict)
