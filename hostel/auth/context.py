"""
Session identity - who is making the request.

This is the lightweight object passed to route handlers once the session
gate has let a request through.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from hostel.core.models import Role, User


@dataclass(frozen=True)
class SessionIdentity:
    """
    The authenticated {id, role, name} attached to a session.

    Never carries the password or its hash.
    """

    id: str
    role: Role
    name: str

    @property
    def is_warden(self) -> bool:
        return self.role == Role.WARDEN

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["role"] = self.role.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionIdentity:
        return cls(id=str(data["id"]), role=Role(data["role"]), name=data["name"])

    @classmethod
    def from_user(cls, user: User) -> SessionIdentity:
        return cls(id=user.id, role=user.role, name=user.name)
