"""Application service: Show Profile use case (query)."""

from __future__ import annotations

from agrimarket.application.dto import UserDTO
from agrimarket.application.mappers import user_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError
from agrimarket.domain.repository.user_repository import UserRepository


class ShowProfileHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user_to_dto(user)
