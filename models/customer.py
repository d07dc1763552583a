# -*- coding: utf-8 -*-
"""
Customer entity models.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp from the API, tolerating a trailing 'Z'."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class CustomerDraft:
    """Editable, not yet persisted customer fields."""

    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    email: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the request body the API expects."""
        return asdict(self)

    @classmethod
    def from_customer(cls, customer: "Customer") -> "CustomerDraft":
        """Build a draft from a stored customer (edit mode)."""
        return cls(
            first_name=customer.first_name,
            last_name=customer.last_name,
            phone_number=customer.phone_number,
            email=customer.email or "",
        )


@dataclass
class Customer:
    """
    Customer record as returned by the API.

    address_count and has_only_one_address are computed by the server
    and never sent back.
    """

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    email: Optional[str] = None
    address_count: int = 0
    has_only_one_address: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        """Get full name."""
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def created_display(self) -> str:
        """Creation date for tables."""
        from app.config import Config
        if self.created_at:
            return self.created_at.strftime(Config.DATE_FORMAT_DISPLAY)
        return ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        """Create Customer from an API payload."""
        return cls(
            id=data.get("id"),
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            phone_number=data.get("phone_number") or "",
            email=data.get("email"),
            address_count=int(data.get("address_count") or 0),
            has_only_one_address=bool(data.get("has_only_one_address", False)),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
