"""User service: registration and listing."""

from typing import List, Optional

import structlog
from fastapi import UploadFile

from userdeck.domain.repositories.user_repository import UserRepository
from userdeck.domain.schemas.user import UserCreate, UserRead
from userdeck.infrastructure.storage import PhotoStorage

logger = structlog.get_logger(__name__)


def register_user(
    repo: UserRepository,
    storage: PhotoStorage,
    name: Optional[str],
    email: Optional[str],
    photo: Optional[UploadFile] = None,
) -> UserCreate:
    """Store the photo (if any), then insert the user row.

    The photo is written before the insert and is not removed if the insert
    fails, so a rejected registration can leave an orphaned file behind.
    """
    filename = storage.save(photo)
    user_in = UserCreate(name=name, email=email, photo=filename)
    repo.insert_user(user_in)
    logger.info("User registered", email=email, photo=filename)
    return user_in


def list_users(repo: UserRepository) -> List[UserRead]:
    """All users, newest first."""
    return repo.list_users()
