"""
Enquiry model - a customer request directed at a company.
The status field places the enquiry on one of the board's columns.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field


DEFAULT_CHANNEL = "Website"


class EnquiryStatus:
    NEW = "new"
    PENDING = "pending"
    COMPLETED = "completed"

    ALL = (NEW, PENDING, COMPLETED)


class EnquiryPriority:
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    ALL = (HIGH, MEDIUM, LOW)


def _new_id() -> str:
    return uuid.uuid4().hex


class Enquiry(SQLModel, table=True):
    """
    Enquiry entity - submitted by a customer, owned by a company.
    Only `status` changes once the enquiry is on the board.
    """
    id: str = Field(default_factory=_new_id, primary_key=True)
    company_id: str = Field(index=True)

    # Contact info
    customer_name: str
    customer_email: str = Field(index=True)

    # Body
    title: str
    content: str = ""
    form_name: Optional[str] = None  # Website, WhatsApp, Facebook, Instagram

    # Board state
    status: str = Field(default=EnquiryStatus.NEW, index=True)  # new, pending, completed
    priority: Optional[str] = Field(default=EnquiryPriority.MEDIUM)  # high, medium, low

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def channel(self) -> str:
        return self.form_name or DEFAULT_CHANNEL

    @property
    def effective_priority(self) -> str:
        if self.priority in EnquiryPriority.ALL:
            return self.priority
        return EnquiryPriority.MEDIUM
