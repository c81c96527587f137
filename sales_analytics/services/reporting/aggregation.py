"""
Sales Aggregation
=================

Pure functions yang mengubah daftar Sale (sudah di-load bersama items,
product, category, employee, customer) menjadi angka report.

Semua akumulasi memakai Decimal dengan presisi penuh. Pembulatan 2 digit
hanya dilakukan di output boundary lewat round_money().
"""

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List

from ...models import DISCOUNT_PERCENT

NO_CATEGORY = 'No Category'

ZERO = Decimal('0')
CENT = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """None -> 0; float dikonversi lewat str agar tidak membawa noise biner"""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(value) -> Decimal:
    """Round half up ke 2 desimal (10.005 -> 10.01)"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def resolve_custom_discount(sale) -> Decimal:
    """Custom discount dalam satuan mata uang, apapun tipe yang disimpan"""
    value = to_decimal(sale.custom_discount)
    if sale.custom_discount_type == DISCOUNT_PERCENT:
        return to_decimal(sale.total_amount) * value / 100
    # None / 'fixed' / nilai lain diperlakukan sebagai fixed
    return value


def net_contribution(sale) -> Decimal:
    """Gross - product discount - resolved custom discount"""
    return (
        to_decimal(sale.total_amount)
        - to_decimal(sale.discount)
        - resolve_custom_discount(sale)
    )


def aggregate_by_category(sales: Iterable) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for sale in sales:
        for item in sale.items:
            category = item.product.category if item.product is not None else None
            name = category.name if category is not None else NO_CATEGORY
            totals[name] += to_decimal(item.total_price)
    return dict(totals)


def aggregate_by_payment_method(sales: Iterable) -> Dict[str, Decimal]:
    """Gross total_amount per payment_method (key apa adanya)"""
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for sale in sales:
        totals[sale.payment_method] += to_decimal(sale.total_amount)
    return dict(totals)


@dataclass
class EmployeeSales:
    employee_name: str
    total_net_sales: Decimal = ZERO


def aggregate_by_employee(sales: Iterable) -> Dict[str, EmployeeSales]:
    """
    Net sales per nama employee. Sale tanpa employee dilewati; dua employee
    dengan nama yang sama digabung ke satu entry.
    """
    summary: Dict[str, EmployeeSales] = {}
    for sale in sales:
        if sale.employee is None:
            continue
        name = sale.employee.name
        entry = summary.setdefault(name, EmployeeSales(employee_name=name))
        entry.total_net_sales += net_contribution(sale)
    return summary


@dataclass
class SummaryStats:
    total_sale_amount: Decimal = ZERO
    total_cost: Decimal = ZERO
    total_product_discount: Decimal = ZERO
    total_custom_discount: Decimal = ZERO
    net_profit: Decimal = ZERO
    total_transactions: int = 0
    average_transaction_value: Decimal = ZERO
    total_customers: int = 0

    MONEY_FIELDS = (
        'total_sale_amount', 'total_cost', 'total_product_discount',
        'total_custom_discount', 'net_profit', 'average_transaction_value',
    )

    def rounded(self) -> Dict[str, Any]:
        """View untuk output: field uang dibulatkan 2 desimal"""
        data = {
            'total_transactions': self.total_transactions,
            'total_customers': self.total_customers,
        }
        for name in self.MONEY_FIELDS:
            data[name] = round_money(getattr(self, name))
        return data


def compute_summary(sales: List, total_customers: int = 0) -> SummaryStats:
    """
    total_customers dihitung terpisah (COUNT DISTINCT di database), jadi
    diteruskan dari caller.
    """
    stats = SummaryStats(total_customers=total_customers)
    for sale in sales:
        stats.total_sale_amount += to_decimal(sale.total_amount)
        stats.total_cost += to_decimal(sale.total_cost)
        stats.total_product_discount += to_decimal(sale.discount)
        stats.total_custom_discount += resolve_custom_discount(sale)
        stats.total_transactions += 1

    stats.net_profit = (
        stats.total_sale_amount
        - stats.total_cost
        - (stats.total_product_discount + stats.total_custom_discount)
    )
    if stats.total_transactions > 0:
        stats.average_transaction_value = stats.total_sale_amount / stats.total_transactions
    return stats


@dataclass
class ProductSales:
    """Report-only projection: Product + sold_quantity dalam window"""
    product: Any
    sold_quantity: int = 0
