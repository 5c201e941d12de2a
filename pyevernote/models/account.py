"""Account information returned by the UserStore."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class AccountInfo:
    """Subset of the EDAM ``User`` struct the client cares about."""

    id: Optional[int]
    username: Optional[str]
    name: Optional[str]
    email: Optional[str]
    service_level: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.name or self.username or str(self.id)

    @classmethod
    def from_user(cls, user: Any) -> "AccountInfo":
        return cls(
            id=getattr(user, "id", None),
            username=getattr(user, "username", None),
            name=getattr(user, "name", None),
            email=getattr(user, "email", None),
            service_level=getattr(user, "serviceLevel", None),
        )
