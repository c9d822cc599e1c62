"""Application service: Update Address use case.

Changes where *future* orders ship.  Orders already placed carry their
own copy of the address and are not touched.
"""

from __future__ import annotations

from agrimarket.application.dto import UserDTO
from agrimarket.application.mappers import user_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError
from agrimarket.domain.repository.user_repository import UserRepository


class UpdateAddressHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, address: str) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")

        user.change_address(address)
        self._user_repo.save(user)
        return user_to_dto(user)
