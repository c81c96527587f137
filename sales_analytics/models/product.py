# sales_analytics/models/product.py
# Product disimpan per batch: satu code bisa punya banyak baris (batch_no berbeda)

from sqlalchemy import Column, Integer, String, ForeignKey, Date
from sqlalchemy.orm import relationship
from .base import BaseModel


class Category(BaseModel):
    __tablename__ = 'categories'

    name = Column(String(100), nullable=False, unique=True)

    products = relationship('Product', back_populates='category')

    def __repr__(self):
        return f'<Category {self.name}>'


class Product(BaseModel):
    """Model untuk satu batch inventory dari sebuah product code"""
    __tablename__ = 'products'

    name = Column(String(150), nullable=False)
    code = Column(String(50), nullable=False, index=True)
    batch_no = Column(String(50))

    # Quantity tracking
    total_quantity = Column(Integer, default=0, nullable=False)   # Jumlah saat pembelian
    stock_quantity = Column(Integer, default=0, nullable=False)   # Sisa stock

    purchase_date = Column(Date)
    expire_date = Column(Date)

    category_id = Column(Integer, ForeignKey('categories.id'), nullable=True)
    category = relationship('Category', back_populates='products')

    sale_items = relationship('SaleItem', back_populates='product')

    def __repr__(self):
        return f'<Product {self.code} batch={self.batch_no}>'
