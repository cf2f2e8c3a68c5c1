"""User domain service."""

from typing import Iterable

import logfire

from roost.domain.error import NotFoundError
from roost.domain.model import User
from roost.domain.repository import UserRepository
from roost.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_authors(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load the authors of a batch of comments in one query.

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Users keyed by ID; unknown authors are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_authors", count=len(unique_ids)):
            authors = await self.user_repository.find_by_ids(unique_ids)
            if len(authors) < len(unique_ids):
                logfire.warn(
                    "Some comment authors not found",
                    requested=len(unique_ids),
                    found=len(authors),
                )
            return authors
