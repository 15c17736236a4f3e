"""
Enquiry board schemas.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel

from enquiryhub.models.enquiry import Enquiry


class EnquiryCard(BaseModel):
    """An enquiry as shown on a board column."""
    id: str
    title: str
    customer_name: str
    customer_email: str
    company_id: str
    content: str
    channel: str
    priority: str
    status: str
    created_at: datetime

    @classmethod
    def from_enquiry(cls, enquiry: Enquiry) -> "EnquiryCard":
        return cls(
            id=enquiry.id,
            title=enquiry.title,
            customer_name=enquiry.customer_name,
            customer_email=enquiry.customer_email,
            company_id=enquiry.company_id,
            content=enquiry.content,
            channel=enquiry.channel,
            priority=enquiry.effective_priority,
            status=enquiry.status,
            created_at=enquiry.created_at,
        )


class BoardStats(BaseModel):
    """Enquiry counts per column."""
    total: int
    new: int
    pending: int
    completed: int


class NotificationResponse(BaseModel):
    """Toast-style notification."""
    title: str
    description: str
    severity: str


class BoardResponse(BaseModel):
    """Board columns for the current viewer."""
    new: List[EnquiryCard]
    pending: List[EnquiryCard]
    completed: List[EnquiryCard]
    stats: BoardStats
    is_empty: bool
    demo: bool
    notifications: List[NotificationResponse] = []


class MoveRequest(BaseModel):
    """Move an enquiry from one column to another."""
    enquiry_id: str
    from_status: str
    to_status: str

    class Config:
        json_schema_extra = {
            "example": {
                "enquiry_id": "1",
                "from_status": "new",
                "to_status": "pending"
            }
        }


class MoveResult(BaseModel):
    """Outcome of a move: applied locally, and whether the store confirmed it."""
    enquiry_id: str
    from_status: str
    to_status: str
    moved: bool = False
    persisted: bool = False
    rolled_back: bool = False
    error: Optional[str] = None


class MoveResponse(MoveResult):
    """Move outcome plus the notifications raised while applying it."""
    notifications: List[NotificationResponse] = []
