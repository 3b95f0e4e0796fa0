from pathlib import Path

import pytest
from sqlalchemy import create_engine

from userdeck.config import Settings
from userdeck.core.exceptions import DatabaseError, StartupFailure
from userdeck.domain.schemas.user import UserCreate
from userdeck.infrastructure.database import build_engine, build_session_factory, init_schema
from userdeck.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


@pytest.fixture
def session(settings: Settings):
    engine = build_engine(settings)
    init_schema(engine)
    db = build_session_factory(engine)()
    yield db
    db.close()
    engine.dispose()


@pytest.fixture
def repo(session) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(session)


def test_list_users_empty(repo):
    assert repo.list_users() == []


def test_insert_and_list_newest_first(repo):
    for name in ("Alice", "Budi", "Citra"):
        repo.insert_user(UserCreate(name=name, email=f"{name.lower()}@example.com"))

    users = repo.list_users()

    assert [u.name for u in users] == ["Citra", "Budi", "Alice"]
    assert [u.id for u in users] == sorted((u.id for u in users), reverse=True)
    assert all(u.photo is None for u in users)


def test_insert_keeps_photo_filename(repo):
    repo.insert_user(UserCreate(name="Dewi", email="dewi@example.com", photo="1-2.png"))
    assert repo.list_users()[0].photo == "1-2.png"


def test_duplicate_email_raises_database_error(repo):
    repo.insert_user(UserCreate(name="Eka", email="eka@example.com"))

    with pytest.raises(DatabaseError) as excinfo:
        repo.insert_user(UserCreate(name="Eka Again", email="eka@example.com"))

    assert excinfo.value.message == "Database error"
    assert len(repo.list_users()) == 1


def test_missing_name_raises_database_error(repo):
    with pytest.raises(DatabaseError):
        repo.insert_user(UserCreate(name=None, email="noname@example.com"))
    assert repo.list_users() == []


def test_list_on_missing_table_raises_db_error(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.sqlite3'}")
    db = build_session_factory(engine)()
    try:
        with pytest.raises(DatabaseError) as excinfo:
            SQLAlchemyUserRepository(db).list_users()
    finally:
        db.close()
    assert excinfo.value.message == "DB error"


def test_init_schema_is_idempotent(settings: Settings):
    engine = build_engine(settings)
    init_schema(engine)
    init_schema(engine)
    engine.dispose()


def test_init_schema_failure_is_startup_failure(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite3'}")
    with pytest.raises(StartupFailure):
        init_schema(engine)
