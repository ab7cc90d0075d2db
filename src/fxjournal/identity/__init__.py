"""Identity exports."""

from fxjournal.identity.models import User
from fxjournal.identity.provider import IdentityProvider, StaticIdentityProvider

__all__ = [
    "IdentityProvider",
    "StaticIdentityProvider",
    "User",
]
