"""
Database engine, session management, and base model.

The ledger store is a SQLAlchemy database. By default it is a
private in-memory SQLite database (DATABASE_URL=sqlite://), so
nothing survives a restart; pointing DATABASE_URL at a file or
server database changes nothing above this module.
"""

import threading

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from demo_bank.config import get_settings

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def serialize_connection_use(engine: Engine) -> None:
    """
    Let only one session at a time hold the engine's connection.

    The guard is taken when a session checks the connection out of
    the pool and released when it is checked back in (commit,
    rollback or close). Without it, one session closing would roll
    back another session's uncommitted writes on the shared
    connection.
    """
    guard = threading.Lock()

    @event.listens_for(engine, "checkout")
    def _acquire(dbapi_connection, connection_record, connection_proxy):
        guard.acquire()

    @event.listens_for(engine, "checkin")
    def _release(dbapi_connection, connection_record):
        guard.release()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    An in-memory SQLite database exists only inside the connection
    that created it, so every session must share that one connection
    (StaticPool), one transaction at a time. SQLite connections are
    also handed between the request threads, hence
    check_same_thread=False.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
            engine = create_engine(database_url, **kwargs)
            serialize_connection_use(engine)
            return engine
        return create_engine(database_url, **kwargs)

    return create_engine(database_url, pool_pre_ping=True)


settings = get_settings()

# --- Engine ---
engine = build_engine(settings.DATABASE_URL)

# --- Session Factory ---
# autocommit=False means we explicitly control when changes
# are saved. The transfer engine commits inside its lock scope.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally pattern ensures the session is always
    closed, even if the endpoint raises.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
