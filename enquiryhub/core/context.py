"""
Viewer context passed explicitly into the board.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator


ViewerRole = Literal["company", "customer"]


class BoardScope(BaseModel):
    """
    Which enquiries a viewer can see.
    Companies see enquiries they own, customers see enquiries they submitted.
    """
    model_config = ConfigDict(frozen=True)

    role: ViewerRole
    company_id: Optional[str] = None
    email: Optional[str] = None

    @model_validator(mode="after")
    def check_identifier(self):
        if self.role == "company" and not self.company_id:
            raise ValueError("company scope requires company_id")
        if self.role == "customer" and not self.email:
            raise ValueError("customer scope requires email")
        return self

    @classmethod
    def for_company(cls, company_id: str) -> "BoardScope":
        return cls(role="company", company_id=company_id)

    @classmethod
    def for_customer(cls, email: str) -> "BoardScope":
        return cls(role="customer", email=email)

    @property
    def cache_key(self) -> str:
        if self.role == "company":
            return f"company:{self.company_id}"
        return f"customer:{self.email.lower()}"


class BoardContext(BaseModel):
    """Session state for one viewer: scope, demo flag and move policy."""
    model_config = ConfigDict(frozen=True)

    scope: BoardScope
    demo: bool = False
    rollback_on_failure: bool = False
