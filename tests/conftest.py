"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Minimal environment for tests: in-memory SQLite, known signing key
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("DEMO_MODE", "false")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import AsyncMock, MagicMock

from enquiryhub.core.cache import QueryCache
from enquiryhub.core.context import BoardScope
from enquiryhub.core.exceptions import NotFoundError, StoreError
from enquiryhub.models.enquiry import Enquiry
from enquiryhub.services.sources import EnquirySource


def make_enquiry(
    id: str,
    status: str = "new",
    title: str = "Product Enquiry",
    customer_name: str = "John Smith",
    customer_email: str = "john@example.com",
    company_id: str = "acme",
    content: str = "Could you send more details?",
    form_name: str = None,
    priority: str = "medium",
    age_days: int = 0,
) -> Enquiry:
    """Build an unsaved Enquiry for tests."""
    created_at = datetime(2024, 1, 1) + timedelta(days=age_days)
    return Enquiry(
        id=id,
        status=status,
        title=title,
        customer_name=customer_name,
        customer_email=customer_email,
        company_id=company_id,
        content=content,
        form_name=form_name,
        priority=priority,
        created_at=created_at,
        updated_at=created_at,
    )


class InMemorySource(EnquirySource):
    """Enquiry source backed by a dict; set fail_updates to simulate store outages."""

    is_live = True

    def __init__(self, enquiries=None):
        self.rows = {e.id: e.model_dump() for e in (enquiries or [])}
        self.fail_updates = False
        self.fail_fetch = False
        self.updates = []
        self.invalidations = 0

    async def fetch(self, scope: BoardScope):
        if self.fail_fetch:
            raise StoreError("Fetch enquiries", "connection refused")
        rows = self.rows.values()
        if scope.role == "company":
            rows = [r for r in rows if r["company_id"] == scope.company_id]
        else:
            rows = [r for r in rows if r["customer_email"].lower() == scope.email.lower()]
        return [Enquiry(**row) for row in rows]

    async def update_status(self, enquiry_id: str, status: str):
        self.updates.append((enquiry_id, status))
        if self.fail_updates:
            raise StoreError("Update enquiry status", "connection reset")
        if enquiry_id not in self.rows:
            raise NotFoundError("Enquiry", enquiry_id)
        self.rows[enquiry_id]["status"] = status

    def invalidate(self):
        self.invalidations += 1


@pytest.fixture
def company_scope():
    """Scope of the 'acme' company viewer."""
    return BoardScope.for_company("acme")


@pytest.fixture
def sample_enquiries():
    """Two new, one pending, one completed enquiry for 'acme'."""
    return [
        make_enquiry("1", "new", title="Product Enquiry", form_name="Website"),
        make_enquiry(
            "2", "new", title="Service Question", customer_name="Emma Johnson",
            customer_email="emma@example.com", content="Same-day delivery?", form_name="WhatsApp"
        ),
        make_enquiry(
            "3", "pending", title="Refund Request", customer_name="Sarah Wilson",
            customer_email="sarah@example.com", content="Refund for my purchase", form_name="Instagram"
        ),
        make_enquiry(
            "4", "completed", title="Order Confirmation", customer_name="Jennifer Taylor",
            customer_email="jennifer@example.com", content="Thanks for confirming"
        ),
    ]


@pytest.fixture
def mock_source(sample_enquiries):
    """Live EnquirySource mock returning sample_enquiries."""
    source = MagicMock(spec=EnquirySource)
    source.is_live = True
    source.fetch = AsyncMock(return_value=sample_enquiries)
    source.update_status = AsyncMock(return_value=None)
    source.invalidate = MagicMock()
    return source


@pytest.fixture
def in_memory_source(sample_enquiries):
    """Dict-backed source holding sample_enquiries."""
    return InMemorySource(sample_enquiries)


@pytest.fixture
def query_cache():
    """Fresh query cache."""
    return QueryCache(ttl_seconds=60)


@pytest.fixture
def enquiry_factory():
    """Factory for unsaved Enquiry objects."""
    return make_enquiry
