"""
Enquiry repository - the persistent enquiry store.
"""
import logging
from typing import List

from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from enquiryhub.core.exceptions import StoreError
from enquiryhub.models.enquiry import Enquiry
from enquiryhub.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EnquiryRepository(BaseRepository[Enquiry]):
    """Repository for Enquiry operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Enquiry, session)

    async def list_for_company(self, company_id: str) -> List[Enquiry]:
        """Get all enquiries owned by a company, newest first."""
        try:
            return await self.list(filters={"company_id": company_id})
        except SQLAlchemyError as e:
            logger.error(f"Fetching enquiries for company {company_id} failed: {e}")
            raise StoreError("Fetch enquiries", str(e)) from e

    async def list_for_customer(self, email: str) -> List[Enquiry]:
        """Get all enquiries submitted by a customer email, newest first."""
        query = (
            select(Enquiry)
            .where(func.lower(Enquiry.customer_email) == email.lower())
            .order_by(Enquiry.created_at.desc())
        )
        try:
            result = await self.session.exec(query)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Fetching enquiries for customer {email} failed: {e}")
            raise StoreError("Fetch enquiries", str(e)) from e

    async def update_status(self, enquiry_id: str, status: str) -> bool:
        """Update enquiry status. Returns False if the enquiry does not exist."""
        try:
            enquiry = await self.update(enquiry_id, {"status": status})
            return enquiry is not None
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Updating status of enquiry {enquiry_id} failed: {e}")
            raise StoreError("Update enquiry status", str(e)) from e
