"""
Database engine, session factory and schema bootstrap.
"""

from typing import Any, Dict, Generator

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from userdeck.config import Settings
from userdeck.core.exceptions import StartupFailure

logger = structlog.get_logger(__name__)

Base = declarative_base()


def build_connect_args(settings: Settings) -> Dict[str, Any]:
    """Driver arguments for the configured database URL."""
    url = settings.database_url
    if url.startswith("sqlite"):
        return {"check_same_thread": False}

    connect_args: Dict[str, Any] = {}
    if settings.DATABASE_SSL_ROOT_CERT:
        connect_args["sslmode"] = "verify-full"
        connect_args["sslrootcert"] = settings.DATABASE_SSL_ROOT_CERT
    elif settings.is_production:
        # Encrypted, but the server certificate is not verified (self-signed accepted).
        connect_args["sslmode"] = "require"
    return connect_args


def build_engine(settings: Settings) -> Engine:
    """Create the pooled engine shared by every request."""
    url = settings.database_url
    connect_args = build_connect_args(settings)
    if url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, connect_args=connect_args)
    return create_engine(
        url,
        poolclass=QueuePool,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )


def init_schema(engine: Engine) -> None:
    """Create the ``users`` table if it does not exist yet."""
    from userdeck.domain.models import user  # noqa: F401  (registers the table)

    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as exc:
        raise StartupFailure(
            "Could not create database schema",
            details={"error": str(exc)},
        ) from exc
    logger.info("Database tables created/verified")


def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Yield a session and guarantee it is closed afterwards."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
