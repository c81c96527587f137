"""
Report Routes
=============

Sales report endpoint (role Admin)
"""

from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, Optional

from ...services import ServiceRegistry
from ...dependencies import get_admin_service_registry
from ...responses import APIResponse

router = APIRouter()

@router.get("/sales", response_model=Dict[str, Any])
async def get_sales_report(
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    service_registry: ServiceRegistry = Depends(get_admin_service_registry)
):
    """
    Sales report dalam window created_at

    **Query Parameters:**
    - start_date: mulai 00:00:00 hari tersebut (optional)
    - end_date: sampai akhir hari tersebut (optional)

    Tanpa keduanya, report mencakup semua data.
    """
    report = await service_registry.sales_report_service.generate_sales_report(
        start_date=start_date,
        end_date=end_date
    )
    return APIResponse.success(
        data=report.model_dump(mode='json'),
        message="Sales report generated successfully"
    )
