"""
Base Pydantic Schemas
=====================

Base classes dan common functionality untuk semua schemas (Pydantic V2).
"""

from pydantic import BaseModel, ConfigDict, model_validator
from datetime import datetime
from typing import Optional, Any

class BaseSchema(BaseModel):
    """Base schema untuk response yang dibaca langsung dari ORM object."""

    id: Optional[int] = None

    model_config = ConfigDict(
        from_attributes=True,
        extra='ignore',
    )

    @model_validator(mode='before')
    @classmethod
    def strip_whitespace(cls, data: Any) -> Any:
        """Strip whitespace dari string fields sebelum validasi."""
        if isinstance(data, dict):
            for key, value in data.items():
                if isinstance(value, str):
                    data[key] = value.strip()
        return data

class TimestampMixin(BaseModel):
    """Mixin untuk timestamp fields."""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
