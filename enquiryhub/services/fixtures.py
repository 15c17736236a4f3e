"""
Sample enquiries shown on the demo board.
"""
from datetime import datetime
from typing import List

from enquiryhub.models.enquiry import Enquiry

DEMO_COMPANY_ID = "demo-company"

SAMPLE_ENQUIRIES = [
    {
        "id": "1",
        "title": "Product Enquiry",
        "customer_name": "John Smith",
        "created_at": "2023-05-15",
        "form_name": "Website",
        "content": "I'm interested in your premium package. Could you provide more details?",
        "priority": "high",
        "status": "new",
    },
    {
        "id": "2",
        "title": "Service Question",
        "customer_name": "Emma Johnson",
        "created_at": "2023-05-16",
        "form_name": "WhatsApp",
        "content": "Do you offer same-day delivery for your services?",
        "priority": "medium",
        "status": "new",
    },
    {
        "id": "3",
        "title": "Pricing Information",
        "customer_name": "Michael Brown",
        "created_at": "2023-05-17",
        "form_name": "Facebook",
        "content": "What are your current rates for ongoing support?",
        "priority": "low",
        "status": "new",
    },
    {
        "id": "4",
        "title": "Refund Request",
        "customer_name": "Sarah Wilson",
        "created_at": "2023-05-10",
        "form_name": "Instagram",
        "content": "I'd like to request a refund for my recent purchase.",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "5",
        "title": "Technical Support",
        "customer_name": "David Lee",
        "created_at": "2023-05-12",
        "form_name": "Website",
        "content": "I'm having trouble with the login functionality.",
        "priority": "medium",
        "status": "pending",
    },
    {
        "id": "6",
        "title": "Order Confirmation",
        "customer_name": "Jennifer Taylor",
        "created_at": "2023-05-05",
        "form_name": "Website",
        "content": "Thank you for confirming my order details.",
        "priority": "medium",
        "status": "completed",
    },
    {
        "id": "7",
        "title": "Feature Request",
        "customer_name": "Robert Martin",
        "created_at": "2023-05-07",
        "form_name": "WhatsApp",
        "content": "I suggested a new feature and appreciate your response.",
        "priority": "low",
        "status": "completed",
    },
    {
        "id": "8",
        "title": "Partnership Inquiry",
        "customer_name": "Olivia Williams",
        "created_at": "2023-05-08",
        "form_name": "Facebook",
        "content": "Thank you for the information about your partnership program.",
        "priority": "high",
        "status": "completed",
    },
]


def _customer_email(name: str) -> str:
    return name.lower().replace(" ", ".") + "@example.com"


def build_sample_enquiries() -> List[Enquiry]:
    """Fresh Enquiry objects for the demo board, so moves never touch the samples."""
    enquiries = []
    for row in SAMPLE_ENQUIRIES:
        created_at = datetime.strptime(row["created_at"], "%Y-%m-%d")
        enquiries.append(Enquiry(
            id=row["id"],
            company_id=DEMO_COMPANY_ID,
            customer_name=row["customer_name"],
            customer_email=_customer_email(row["customer_name"]),
            title=row["title"],
            content=row["content"],
            form_name=row["form_name"],
            priority=row["priority"],
            status=row["status"],
            created_at=created_at,
            updated_at=created_at,
        ))
    return enquiries
