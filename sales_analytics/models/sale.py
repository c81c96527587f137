# sales_analytics/models/sale.py
# Header transaksi (Sale) dan detail line item (SaleItem)

from sqlalchemy import Column, Integer, String, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from .base import BaseModel

DISCOUNT_FIXED = 'fixed'
DISCOUNT_PERCENT = 'percent'


class Sale(BaseModel):
    """Model untuk satu transaksi penjualan"""
    __tablename__ = 'sales'

    # Amounts (base currency, tanpa konversi)
    total_amount = Column(Numeric(15, 2), default=0, nullable=False)   # Gross, sebelum discount
    total_cost = Column(Numeric(15, 2), default=0, nullable=False)
    discount = Column(Numeric(15, 2), default=0, nullable=False)       # Product-level discount

    # Custom discount: nilai absolut ('fixed') atau persen dari gross ('percent')
    custom_discount = Column(Numeric(15, 2), default=0)
    custom_discount_type = Column(String(10), default=DISCOUNT_FIXED)

    payment_method = Column(String(30), default='cash', nullable=False)

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=True)
    employee = relationship('Employee', back_populates='sales')

    customer_id = Column(Integer, ForeignKey('customers.id'), nullable=True, index=True)
    customer = relationship('Customer', back_populates='sales')

    items = relationship(
        'SaleItem', back_populates='sale',
        cascade='all, delete-orphan', order_by='SaleItem.id'
    )

    def __repr__(self):
        return f'<Sale {self.id} {self.total_amount} {self.payment_method}>'


class SaleItem(BaseModel):
    """Line item. Tidak punya window sendiri, ikut created_at dari Sale."""
    __tablename__ = 'sale_items'

    sale_id = Column(Integer, ForeignKey('sales.id'), nullable=False, index=True)
    sale = relationship('Sale', back_populates='items')

    product_id = Column(Integer, ForeignKey('products.id'), nullable=False, index=True)
    product = relationship('Product', back_populates='sale_items')

    quantity = Column(Integer, nullable=False, default=0)
    total_price = Column(Numeric(15, 2), nullable=False, default=0)   # Sudah net dari adjustment line

    def __repr__(self):
        return f'<SaleItem sale={self.sale_id} product={self.product_id} qty={self.quantity}>'
