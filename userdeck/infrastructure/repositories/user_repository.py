"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userdeck.core.exceptions import DatabaseError
from userdeck.domain.models.user import User
from userdeck.domain.repositories.user_repository import UserRepository
from userdeck.domain.schemas.user import UserCreate, UserRead

logger = structlog.get_logger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """User repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    def insert_user(self, user_in: UserCreate) -> None:
        db_obj = User(**user_in.model_dump())
        try:
            self.db.add(db_obj)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Insert user failed", email=user_in.email)
            raise DatabaseError("Database error", details={"error": str(exc)}) from exc

    def list_users(self) -> List[UserRead]:
        try:
            rows = self.db.scalars(select(User).order_by(User.id.desc())).all()
        except SQLAlchemyError as exc:
            logger.exception("List users failed")
            raise DatabaseError("DB error", details={"error": str(exc)}) from exc
        return [UserRead.model_validate(row) for row in rows]
