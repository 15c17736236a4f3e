"""
Enquiry data sources for the board.
The live source reads and writes the enquiry store, the fixture source
serves the demo dataset. Both hand out detached copies the board may mutate.
"""
import logging
from abc import ABC, abstractmethod
from typing import List

from enquiryhub.core.cache import QueryCache, ENQUIRIES_CACHE_PREFIX, make_cache_key
from enquiryhub.core.context import BoardScope
from enquiryhub.core.exceptions import NotFoundError
from enquiryhub.models.enquiry import Enquiry
from enquiryhub.repositories.enquiry_repo import EnquiryRepository
from enquiryhub.services.fixtures import build_sample_enquiries

logger = logging.getLogger(__name__)


class EnquirySource(ABC):
    """Base interface for where the board gets its enquiries from."""

    # Live sources persist moves; fixture sources keep them local
    is_live: bool = True

    @abstractmethod
    async def fetch(self, scope: BoardScope) -> List[Enquiry]:
        """Fetch every enquiry visible to the scope."""
        pass

    @abstractmethod
    async def update_status(self, enquiry_id: str, status: str) -> None:
        """
        Persist a status change.

        Raises:
            StoreError: the store call failed
            NotFoundError: the enquiry no longer exists
        """
        pass

    def invalidate(self) -> None:
        """Tell other readers their cached enquiries are stale."""
        pass


class StoreEnquirySource(EnquirySource):
    """Reads through the query cache, writes to the enquiry repository."""

    is_live = True

    def __init__(self, repo: EnquiryRepository, cache: QueryCache):
        self.repo = repo
        self.cache = cache

    async def fetch(self, scope: BoardScope) -> List[Enquiry]:
        key = make_cache_key(ENQUIRIES_CACHE_PREFIX, scope.cache_key)
        rows = self.cache.get(key)
        if rows is None:
            if scope.role == "company":
                enquiries = await self.repo.list_for_company(scope.company_id)
            else:
                enquiries = await self.repo.list_for_customer(scope.email)
            rows = [enquiry.model_dump() for enquiry in enquiries]
            self.cache.set(key, rows)
            logger.info(f"Fetched {len(rows)} enquiries for {scope.cache_key}")

        return [Enquiry(**row) for row in rows]

    async def update_status(self, enquiry_id: str, status: str) -> None:
        updated = await self.repo.update_status(enquiry_id, status)
        if not updated:
            raise NotFoundError("Enquiry", enquiry_id)

    def invalidate(self) -> None:
        self.cache.invalidate(ENQUIRIES_CACHE_PREFIX)


class FixtureEnquirySource(EnquirySource):
    """Static demo dataset; the same board is shown whatever the scope."""

    is_live = False

    async def fetch(self, scope: BoardScope) -> List[Enquiry]:
        return build_sample_enquiries()

    async def update_status(self, enquiry_id: str, status: str) -> None:
        # Demo moves only live on the board
        return None
