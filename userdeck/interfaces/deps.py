"""
API Dependencies.
"""

from dataclasses import dataclass
from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from userdeck.config import Settings
from userdeck.domain.repositories.user_repository import UserRepository
from userdeck.infrastructure.database import session_scope
from userdeck.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from userdeck.infrastructure.storage import PhotoStorage


@dataclass
class AppContext:
    """Everything a request handler needs, built once per application."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    storage: PhotoStorage


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    yield from session_scope(context.session_factory)


def get_storage(context: AppContext = Depends(get_context)) -> PhotoStorage:
    return context.storage


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db)
