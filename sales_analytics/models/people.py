from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Employee(BaseModel):
    """Kasir / sales person yang mencatat transaksi"""
    __tablename__ = 'employees'

    name = Column(String(100), nullable=False)

    sales = relationship('Sale', back_populates='employee')

    def __repr__(self):
        return f'<Employee {self.name}>'


class Customer(BaseModel):
    __tablename__ = 'customers'

    name = Column(String(100), nullable=False)
    phone = Column(String(20))

    sales = relationship('Sale', back_populates='customer')

    def __repr__(self):
        return f'<Customer {self.name}>'
