"""Authentication collaborator.

Credentials and tokens are handled upstream; by the time a command runs
we only have the caller's user id.  This resolves it to a Principal
(or refuses) before any use case executes, and the handlers trust the
principal's id for every ownership check.
"""

from __future__ import annotations

from agrimarket.domain.exceptions import AuthorizationError
from agrimarket.domain.model.user import Principal
from agrimarket.domain.repository.user_repository import UserRepository


def authenticate(user_repo: UserRepository, user_id: str | None) -> Principal:
    if not user_id or not user_id.strip():
        raise AuthorizationError("No user given, authorization denied")
    user = user_repo.get_by_id(user_id.strip())
    if user is None:
        raise AuthorizationError("Unknown user, authorization denied")
    return Principal(id=user.id, role=user.role)
