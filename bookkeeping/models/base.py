"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from bookkeeping.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles cases where the database restarted or a
# connection went stale.
# SQLite connections are created in one thread and used in
# FastAPI's worker threads, so the same-thread check is off.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# --- Session Factory ---
# autocommit=False means the caller decides when a posting
# becomes visible: an entry and its lines, or an inventory
# transaction and its journal entry, commit together or not
# at all.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally pattern ensures the session is always
    closed. Closing a session with uncommitted work rolls
    that work back.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
