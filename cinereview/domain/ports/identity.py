from __future__ import annotations
from typing import Dict, Iterable, Protocol

from cinereview.domain.entities.user import UserProfile

class IdentityVerifierPort(Protocol):
    # raises Unauthenticated on a missing/invalid credential
    def verify(self, credential: str | None) -> str: ...

class UserDirectoryPort(Protocol):
    # ids without a profile are simply absent from the result
    def get_users(self, ids: Iterable[str]) -> Dict[str, UserProfile]: ...
