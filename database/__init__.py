"""SQLite storage: schema initialization and repository implementations."""
from .db import init_db, get_db, get_db_path, clear_database, transaction
from .cvs import SQLiteCVRepository
from .users import SQLiteAuthRepository

__all__ = [
    'init_db', 'get_db', 'get_db_path', 'clear_database', 'transaction',
    'SQLiteCVRepository', 'SQLiteAuthRepository',
]
