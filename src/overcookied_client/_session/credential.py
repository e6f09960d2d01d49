# Area: Session
"""Identity and bearer token used to open one connection."""

from __future__ import annotations
from dataclasses import dataclass

from ..types import UserSession


@dataclass(frozen=True)
class Credential:
    user_id: str
    token: str
    name: str = ""
    email: str = ""
    picture: str = ""

    @classmethod
    def from_session(cls, session: UserSession) -> "Credential":
        return cls(
            user_id=session.get("id", ""),
            token=session.get("token", ""),
            name=session.get("name", ""),
            email=session.get("email", ""),
            picture=session.get("picture", ""),
        )

    def __repr__(self) -> str:
        # Keep tokens out of logs
        return f"Credential(user_id={self.user_id!r}, name={self.name!r})"
