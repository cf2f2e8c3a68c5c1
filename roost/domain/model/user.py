"""User entity.

Only the display fields rendered next to a comment live here. Accounts
and authentication are managed elsewhere.
"""

from typing import Optional

from roost.domain.model.common import DomainModel
from roost.domain.value import UserId, Username


class User(DomainModel):
    """Comment author."""

    id: UserId
    username: Username
    first_name: str = ""
    last_name: str = ""
    avatar_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        """First and last name, falling back to the username."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.username.root
