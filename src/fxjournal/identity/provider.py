"""Identity provider interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fxjournal.identity.models import User


class IdentityProvider:
    def get_current_user(self) -> Optional[User]:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class StaticIdentityProvider(IdentityProvider):
    user: Optional[User] = None

    def get_current_user(self) -> Optional[User]:
        return self.user

    def sign_in(self, user: User) -> None:
        self.user = user

    def sign_out(self) -> None:
        self.user = None
