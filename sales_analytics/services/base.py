"""
Base Service Classes
====================

Base class dan utilities untuk semua services
"""

from typing import Sequence
import logging

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

class BaseService:
    """Base service class dengan common functionality"""

    def __init__(self, db_session: AsyncSession, current_user: str = None):
        self.db_session = db_session
        self.current_user = current_user
        self.logger = logging.getLogger(self.__class__.__name__)

    async def _fetch_all(self, query) -> Sequence:
        """Execute a select and return all ORM rows"""
        result = await self.db_session.execute(query)
        return result.scalars().all()

    async def _fetch_scalar(self, query):
        """Execute a select that yields a single value"""
        result = await self.db_session.execute(query)
        return result.scalar()
