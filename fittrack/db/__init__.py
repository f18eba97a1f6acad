"""Database package: engine, session, base, record store."""

from fittrack.db.session import async_session_maker, get_db
from fittrack.db.store import RecordStore

__all__ = ["async_session_maker", "get_db", "RecordStore"]
