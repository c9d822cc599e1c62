"""Application service: Register User use case.

Creates the marketplace profile only.  Credentials are handled by the
authentication collaborator, not here.
"""

from __future__ import annotations

from agrimarket.domain.exceptions import ValidationError
from agrimarket.domain.model.user import Role, User
from agrimarket.domain.repository.user_repository import UserRepository


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        name: str,
        email: str,
        role: str = Role.BUYER.value,
        address: str | None = None,
    ) -> User:
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not email or not email.strip():
            raise ValidationError("Email is required")

        try:
            parsed_role = Role(role)
        except ValueError as exc:
            raise ValidationError(
                f"Role must be one of: {', '.join(r.value for r in Role)}"
            ) from exc

        if self._user_repo.get_by_email(email.strip()) is not None:
            raise ValidationError("User already exists")

        user = User(
            id=self._user_repo.next_id(),
            name=name.strip(),
            email=email.strip().lower(),
            role=parsed_role,
            address=address.strip() if address and address.strip() else None,
        )
        self._user_repo.save(user)
        return user
