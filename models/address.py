# -*- coding: utf-8 -*-
"""
Address entity models.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from models.customer import parse_timestamp


@dataclass
class AddressDraft:
    """Editable, not yet persisted address fields."""

    address_details: str = ""
    city: str = ""
    state: str = ""
    pin_code: str = ""
    is_primary: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the request body the API expects."""
        return asdict(self)

    @classmethod
    def from_address(cls, address: "Address") -> "AddressDraft":
        """Build a draft from a stored address (edit mode)."""
        return cls(
            address_details=address.address_details,
            city=address.city,
            state=address.state,
            pin_code=address.pin_code,
            is_primary=address.is_primary,
        )


@dataclass
class Address:
    """
    Address record as returned by the API.

    Search results also carry the owning customer's name and phone.
    """

    id: Optional[int] = None
    customer_id: Optional[int] = None
    address_details: str = ""
    city: str = ""
    state: str = ""
    pin_code: str = ""
    is_primary: bool = False
    created_at: Optional[datetime] = None

    # Owner annotation (address search only)
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""

    @property
    def customer_name(self) -> str:
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def primary_display(self) -> str:
        return "Primary" if self.is_primary else ""

    @property
    def one_line(self) -> str:
        """Address formatted on a single line."""
        return f"{self.address_details}, {self.city}, {self.state} - {self.pin_code}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        """Create Address from an API payload."""
        return cls(
            id=data.get("id"),
            customer_id=data.get("customer_id"),
            address_details=data.get("address_details") or "",
            city=data.get("city") or "",
            state=data.get("state") or "",
            pin_code=str(data.get("pin_code") or ""),
            is_primary=bool(data.get("is_primary", False)),
            created_at=parse_timestamp(data.get("created_at")),
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            phone_number=data.get("phone_number") or "",
        )
