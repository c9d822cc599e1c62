"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from agrimarket.domain.model.user import Role, User
from agrimarket.domain.repository.user_repository import UserRepository
from agrimarket.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> str:
        ids = [int(u.id) for u in self._load() if u.id.isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, user_id: str) -> User | None:
        for user in self._load():
            if user.id == user_id:
                return user
        return None

    def get_by_email(self, email: str) -> User | None:
        for user in self._load():
            if user.email.lower() == email.lower():
                return user
        return None

    def save(self, user: User) -> None:
        with self._file.lock:
            users = [u for u in self._load() if u.id != user.id]
            users.append(user)
            self._file.persist([self._to_raw(u) for u in users])

    def _load(self) -> list[User]:
        return self._file.load_as(self._to_domain)

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "address": user.address,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            role=Role(raw["role"]),
            address=raw.get("address"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
