"""
Product Service
===============

Service untuk lookup inventory batch berdasarkan product code
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..base import BaseService
from ...models import Product
from ...schemas import ProductBatchSchema, ProductCodeLookupSchema

class ProductService(BaseService):
    """Service untuk Product lookup"""

    def __init__(self, db_session: AsyncSession, current_user: str = None):
        super().__init__(db_session, current_user)

    async def lookup_by_code(self, code: Optional[str]) -> ProductCodeLookupSchema:
        """
        Semua batch dengan code yang sama persis, terbaru dulu.
        Code kosong dan code yang tidak ditemukan sama-sama menghasilkan
        records kosong dengan total 0.
        """
        if not code:
            return ProductCodeLookupSchema()

        query = (
            select(Product)
            .filter(Product.code == code)
            .order_by(Product.created_at.desc(), Product.id.desc())
        )
        products = await self._fetch_all(query)
        self.logger.debug(f"Lookup code={code!r} matched {len(products)} batches")

        return ProductCodeLookupSchema(
            records=[ProductBatchSchema.model_validate(p) for p in products],
            total_quantity=sum(p.total_quantity or 0 for p in products),
            remaining_quantity=sum(p.stock_quantity or 0 for p in products),
        )
