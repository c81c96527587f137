"""
Reporting Domain Services
=========================

Services untuk sales report: date window, aggregators dan report builder
"""

from .date_range import Interval, UNBOUNDED, resolve
from .aggregation import (
    NO_CATEGORY, EmployeeSales, ProductSales, SummaryStats,
    aggregate_by_category, aggregate_by_employee, aggregate_by_payment_method,
    compute_summary, net_contribution, resolve_custom_discount, round_money,
)
from .sales_reports import SalesReportService

__all__ = [
    'Interval', 'UNBOUNDED', 'resolve',
    'NO_CATEGORY', 'EmployeeSales', 'ProductSales', 'SummaryStats',
    'aggregate_by_category', 'aggregate_by_employee', 'aggregate_by_payment_method',
    'compute_summary', 'net_contribution', 'resolve_custom_discount', 'round_money',
    'SalesReportService',
]
