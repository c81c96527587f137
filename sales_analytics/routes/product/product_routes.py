"""
Product Routes
==============

Lookup inventory batch berdasarkan product code
"""

from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, Optional

from ...services import ServiceRegistry
from ...dependencies import get_service_registry_optional
from ...responses import APIResponse

router = APIRouter()

@router.get("/search-by-code", response_model=Dict[str, Any])
async def search_by_code(
    code: Optional[str] = Query(None),
    service_registry: ServiceRegistry = Depends(get_service_registry_optional)
):
    """
    Semua batch untuk satu product code

    **Returns:**
    - records: batch_no, total_quantity, stock_quantity, expire_date, purchase_date
    - total_quantity: jumlah total_quantity semua batch
    - remaining_quantity: jumlah stock_quantity semua batch
    """
    result = await service_registry.product_service.lookup_by_code(code)
    return APIResponse.success(
        data=result.model_dump(mode='json'),
        message="Product batches retrieved successfully"
    )
