from __future__ import annotations

from dataclasses import dataclass

from .enums import Role


@dataclass(frozen=True)
class Actor:
    """Who is performing an action. Passed explicitly into every privileged call."""

    role: Role
    actor_id: str
    name: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_hr(self) -> bool:
        return self.role == Role.HR
