"""SQLite-backed account and session repository."""

import secrets
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from core.exceptions import RepositoryError
from core.logger import get_logger
from database.db import format_timestamp, parse_timestamp, transaction
from models.auth_models import (
    AuthCredentials,
    AuthEvent,
    AuthSession,
    AuthStateCallback,
    AuthSubscription,
    SignUpData,
    User,
)
from repositories.base import AuthRepository
from utils.ids import IdFactory, generate_id

logger = get_logger("database")


def _row_to_user(row) -> User:
    """Convert DB row to User."""
    return User(
        id=row["id"],
        email=row["email"],
        full_name=row["full_name"],
        avatar_url=row["avatar_url"],
        created_at=parse_timestamp(row["created_at"]),
    )


class SQLiteAuthRepository(AuthRepository):
    """
    Accounts with hashed passwords and opaque session tokens.

    One instance tracks one client's session: pass ``access_token`` to resume
    a session issued earlier (e.g. stored in a web session cookie).
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        access_token: Optional[str] = None,
        id_factory: IdFactory = generate_id,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.db_path = db_path
        self.access_token = access_token
        self.id_factory = id_factory
        self.clock = clock
        self._listeners: List[AuthStateCallback] = []

    def _notify(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        for callback in list(self._listeners):
            callback(event, session)

    def _open_session(self, conn, user: User) -> AuthSession:
        session = AuthSession(
            user=user,
            access_token=secrets.token_urlsafe(32),
            refresh_token=secrets.token_urlsafe(32),
        )
        conn.execute(
            "INSERT INTO sessions (access_token, refresh_token, user_id, created_at) VALUES (?, ?, ?, ?)",
            (session.access_token, session.refresh_token, user.id, format_timestamp(self.clock())),
        )
        return session

    def sign_up(self, data: SignUpData) -> AuthSession:
        """Create an account and sign it in."""
        with transaction(self.db_path) as conn:
            existing = conn.execute("SELECT id FROM users WHERE email = ?", (data.email,)).fetchone()
            if existing:
                raise RepositoryError("User already registered")

            user = User(
                id=self.id_factory(),
                email=data.email,
                full_name=data.full_name or None,
                created_at=self.clock(),
            )
            try:
                conn.execute(
                    """
                    INSERT INTO users (id, email, password_hash, full_name, avatar_url, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (user.id, user.email, generate_password_hash(data.password), user.full_name,
                     None, format_timestamp(user.created_at)),
                )
            except sqlite3.IntegrityError as e:
                # email UNIQUE constraint: a concurrent sign-up won the race
                raise RepositoryError("User already registered") from e
            session = self._open_session(conn, user)

        self.access_token = session.access_token
        logger.info(f"Account created: {user.id}")
        self._notify(AuthEvent.SIGNED_IN, session)
        return session

    def sign_in(self, credentials: AuthCredentials) -> AuthSession:
        """Check the password and open a new session."""
        with transaction(self.db_path) as conn:
            row = conn.execute("SELECT * FROM users WHERE email = ?", (credentials.email,)).fetchone()
            if not row or not check_password_hash(row["password_hash"], credentials.password):
                raise RepositoryError("Invalid login credentials")
            session = self._open_session(conn, _row_to_user(row))

        self.access_token = session.access_token
        self._notify(AuthEvent.SIGNED_IN, session)
        return session

    def sign_out(self) -> None:
        """Revoke the current session, if any."""
        if self.access_token:
            with transaction(self.db_path) as conn:
                conn.execute("DELETE FROM sessions WHERE access_token = ?", (self.access_token,))
        self.access_token = None
        self._notify(AuthEvent.SIGNED_OUT, None)

    def get_current_user(self) -> Optional[User]:
        """User owning the current access token, or None."""
        if not self.access_token:
            return None
        with transaction(self.db_path) as conn:
            row = conn.execute(
                """
                SELECT users.* FROM sessions
                JOIN users ON users.id = sessions.user_id
                WHERE sessions.access_token = ?
                """,
                (self.access_token,),
            ).fetchone()
        if not row:
            return None
        return _row_to_user(row)

    def current_user_id(self) -> Optional[str]:
        user = self.get_current_user()
        return user.id if user else None

    def on_auth_state_change(self, callback: AuthStateCallback) -> AuthSubscription:
        self._listeners.append(callback)

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return AuthSubscription(remove)
