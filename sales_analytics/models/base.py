from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from datetime import datetime

# Create a declarative base which all models will inherit from
Base = declarative_base()

# Common columns for every table. Abstract, so no table is created for it.
# created_at is the timestamp every report window filters on.
class BaseModel(Base):
    __abstract__ = True
    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
