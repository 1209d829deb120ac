"""Database package — async SQLAlchemy engine, session factory, Base."""
from catalog.db.base import (
    Base,
    async_session_factory,
    create_all,
    enable_sqlite_foreign_keys,
    engine,
    get_db,
)

__all__ = [
    "Base",
    "async_session_factory",
    "create_all",
    "enable_sqlite_foreign_keys",
    "engine",
    "get_db",
]
