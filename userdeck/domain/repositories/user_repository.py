"""
User Repository Interface.
Defines the data access operations for Users.
"""

from typing import List, Protocol

from userdeck.domain.schemas.user import UserCreate, UserRead


class UserRepository(Protocol):
    """Interface for User persistence."""

    def insert_user(self, user_in: UserCreate) -> None:
        """Insert a new user row. Raises DatabaseError on failure."""
        ...

    def list_users(self) -> List[UserRead]:
        """Return every user, newest (highest id) first."""
        ...
