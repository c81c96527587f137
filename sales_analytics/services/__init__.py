"""
Sales Analytics Services Module
===============================

Services layer dengan dependency injection pattern untuk service management
"""

from .base import BaseService
from .exceptions import *

# Product Domain
from .product import ProductService

# Reporting Domain
from .reporting import SalesReportService

__all__ = [
    # Base Classes
    'BaseService',

    # Product Domain
    'ProductService',

    # Reporting Domain
    'SalesReportService',
]


class ServiceRegistry:
    """
    Service Registry untuk dependency injection.
    Satu registry per request, semua service berbagi db_session yang sama.
    """

    def __init__(self, db_session, config: dict, current_user: str = None):
        self.db_session = db_session
        self.config = config
        self.current_user = current_user
        self._services = {}

        self._init_domain_services()

    def _init_domain_services(self):
        """Initialize domain services"""
        self._services['product'] = ProductService(
            db_session=self.db_session,
            current_user=self.current_user
        )

        self._services['sales_reports'] = SalesReportService(
            db_session=self.db_session,
            current_user=self.current_user
        )

    @property
    def product_service(self) -> ProductService:
        """Get ProductService"""
        return self._services['product']

    @property
    def sales_report_service(self) -> SalesReportService:
        """Get SalesReportService"""
        return self._services['sales_reports']


# Factory function untuk easy service registry creation
def create_service_registry(db_session, config: dict, current_user: str = None) -> ServiceRegistry:
    """Factory function untuk membuat ServiceRegistry"""
    return ServiceRegistry(db_session, config, current_user)
