from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .settings import settings


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def session_factory() -> sessionmaker[Session]:
    """Build the engine on first use so importing the app never opens a connection."""
    global _engine, _session_factory
    if _session_factory is None:
        _engine = create_engine(settings.database_url, pool_pre_ping=True)
        _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)
    return _session_factory


def get_db():
    """One session per request; closed even when the handler raises."""
    with session_factory()() as db:
        yield db
