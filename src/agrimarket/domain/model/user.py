"""User profile and authenticated principal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from agrimarket.domain.exceptions import ValidationError


class Role(Enum):
    BUYER = "buyer"
    COMMUNITY = "community"  # growers and co-ops who list produce


@dataclass
class User:
    id: str
    name: str
    email: str
    role: Role = Role.BUYER
    address: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def change_address(self, address: str) -> None:
        """Orders already placed keep the address they were shipped to."""
        if not address or not address.strip():
            raise ValidationError("Address is required")
        self.address = address.strip()


@dataclass(frozen=True)
class Principal:
    """Who is making the request, as established by authentication."""

    id: str
    role: Role
