"""
Sales Report Service
====================

Service untuk generate sales report dalam window created_at.

Alur: raw start/end date -> Interval -> query sales, products, sold
quantity dan distinct customers -> aggregators -> SalesReportSchema.
Semua query dijalankan berurutan di session yang sama (read-only).
"""

from typing import Dict, List, Optional

from sqlalchemy import select, func, distinct
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..base import BaseService
from ...models import Product, Sale, SaleItem
from ...schemas import (
    SalesReportSchema, SaleSchema, SoldProductSchema, EmployeeSalesSchema,
)
from .date_range import Interval, resolve
from .aggregation import (
    ProductSales, aggregate_by_category, aggregate_by_employee,
    aggregate_by_payment_method, compute_summary, round_money,
)

class SalesReportService(BaseService):
    """Service untuk Sales Report"""

    def __init__(self, db_session: AsyncSession, current_user: str = None):
        super().__init__(db_session, current_user)

    async def select_sales(self, interval: Interval) -> List[Sale]:
        """Sales di dalam window, lengkap dengan items/product/category, employee, customer"""
        query = (
            select(Sale)
            .options(
                selectinload(Sale.items)
                .selectinload(SaleItem.product)
                .selectinload(Product.category),
                selectinload(Sale.employee),
                selectinload(Sale.customer),
            )
            .where(*interval.conditions(Sale.created_at))
            .order_by(Sale.created_at.desc(), Sale.id.desc())
        )
        return list(await self._fetch_all(query))

    async def sold_quantities(self, interval: Interval) -> Dict[int, int]:
        """SUM(quantity) per product_id, dihitung lewat created_at dari parent Sale"""
        query = (
            select(SaleItem.product_id, func.sum(SaleItem.quantity))
            .join(Sale, SaleItem.sale_id == Sale.id)
            .where(*interval.conditions(Sale.created_at))
            .group_by(SaleItem.product_id)
        )
        result = await self.db_session.execute(query)
        return {product_id: total or 0 for product_id, total in result.all()}

    async def select_products(self, interval: Interval) -> List[ProductSales]:
        """
        Unbounded: semua product. Bounded: hanya product yang terjual di
        window (product tanpa penjualan tidak ikut).
        """
        query = select(Product).options(selectinload(Product.category))
        if interval.is_bounded:
            sold_in_window = (
                select(SaleItem.product_id)
                .join(Sale, SaleItem.sale_id == Sale.id)
                .where(*interval.conditions(Sale.created_at))
            )
            query = query.where(Product.id.in_(sold_in_window))
        query = query.order_by(Product.created_at.desc(), Product.id.desc())

        products = await self._fetch_all(query)
        quantities = await self.sold_quantities(interval)
        return [
            ProductSales(product=product, sold_quantity=quantities.get(product.id, 0))
            for product in products
        ]

    async def count_distinct_customers(self, interval: Interval) -> int:
        """COUNT(DISTINCT customer_id) langsung di database, NULL tidak dihitung"""
        query = (
            select(func.count(distinct(Sale.customer_id)))
            .where(*interval.conditions(Sale.created_at))
        )
        return await self._fetch_scalar(query) or 0

    async def generate_sales_report(self, start_date: Optional[str] = None,
                                    end_date: Optional[str] = None) -> SalesReportSchema:
        """Build the full sales report for an optional inclusive date window"""
        interval = resolve(start_date, end_date)
        self.logger.info(
            f"Generating sales report window start={interval.start} end={interval.end} "
            f"requested_by={self.current_user}"
        )

        products = await self.select_products(interval)
        sales = await self.select_sales(interval)
        total_customers = await self.count_distinct_customers(interval)

        summary = compute_summary(sales, total_customers=total_customers).rounded()
        category_sales = aggregate_by_category(sales)
        payment_method_totals = aggregate_by_payment_method(sales)
        employee_sales = aggregate_by_employee(sales)

        self.logger.debug(
            f"Report built: {summary['total_transactions']} sales, {len(products)} products, "
            f"{len(category_sales)} categories, {len(employee_sales)} employees"
        )

        return SalesReportSchema(
            products=[
                SoldProductSchema.model_validate(p.product).model_copy(
                    update={'sold_quantity': p.sold_quantity}
                )
                for p in products
            ],
            sales=[SaleSchema.model_validate(s) for s in sales],

            total_sale_amount=float(summary['total_sale_amount']),
            total_cost=float(summary['total_cost']),
            total_discount=float(summary['total_product_discount']),
            total_custom_discount=float(summary['total_custom_discount']),
            net_profit=float(summary['net_profit']),
            total_transactions=summary['total_transactions'],
            average_transaction_value=float(summary['average_transaction_value']),
            total_customers=summary['total_customers'],

            start_date=start_date,
            end_date=end_date,

            category_sales={
                name: float(round_money(total)) for name, total in category_sales.items()
            },
            employee_sales_summary={
                name: EmployeeSalesSchema(
                    employee_name=entry.employee_name,
                    total_net_sales=float(round_money(entry.total_net_sales)),
                )
                for name, entry in employee_sales.items()
            },
            payment_method_totals={
                method: float(round_money(total)) for method, total in payment_method_totals.items()
            },
        )
