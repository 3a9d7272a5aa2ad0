"""SQLite-backed CV repository."""

import json
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from core.exceptions import RepositoryError
from core.logger import get_logger
from database.db import format_timestamp, parse_timestamp, transaction
from models.cv_models import CVData
from models.saved_cv import CVUpdate, SavedCV
from models.validation import safe_parse_cv_data
from models.value_objects import CVTemplateType
from repositories.base import CVRepository
from utils.ids import IdFactory, generate_id

logger = get_logger("database")

COPY_SUFFIX = " (Copy)"


class SQLiteCVRepository(CVRepository):
    """CVs of the user returned by ``user_id_provider``; other users' rows are invisible."""

    def __init__(
        self,
        user_id_provider: Callable[[], Optional[str]],
        db_path: Optional[Path] = None,
        id_factory: IdFactory = generate_id,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.user_id_provider = user_id_provider
        self.db_path = db_path
        self.id_factory = id_factory
        self.clock = clock

    def _user_id(self) -> str:
        user_id = self.user_id_provider()
        if not user_id:
            raise RepositoryError("User not authenticated")
        return user_id

    def _row_to_cv(self, row) -> SavedCV:
        """Convert DB row to SavedCV."""
        result = safe_parse_cv_data(json.loads(row["cv_data"]))
        if not result.ok:
            logger.error(f"Stored CV {row['id']} has invalid data: {result.as_field_map()}")
            raise RepositoryError(f"Invalid CV data: {result.as_field_map()}")
        return SavedCV(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            cv_data=result.value,
            selected_template=CVTemplateType(row["selected_template"]),
            is_default=bool(row["is_default"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    def _fetch(self, conn, cv_id: str, user_id: str):
        return conn.execute(
            "SELECT * FROM cvs WHERE id = ? AND user_id = ?", (cv_id, user_id)
        ).fetchone()

    def get_all(self) -> List[SavedCV]:
        """Get all CVs of the current user, newest update first."""
        user_id = self._user_id()
        with transaction(self.db_path) as conn:
            rows = conn.execute(
                "SELECT * FROM cvs WHERE user_id = ? ORDER BY updated_at DESC", (user_id,)
            ).fetchall()
        return [self._row_to_cv(row) for row in rows]

    def get_by_id(self, cv_id: str) -> Optional[SavedCV]:
        """Get CV by ID."""
        user_id = self._user_id()
        with transaction(self.db_path) as conn:
            row = self._fetch(conn, cv_id, user_id)
        if not row:
            return None
        return self._row_to_cv(row)

    def create(self, title: str, cv_data: CVData, template: CVTemplateType) -> SavedCV:
        """Create a new CV."""
        user_id = self._user_id()
        cv_id = self.id_factory()
        now = format_timestamp(self.clock())
        with transaction(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO cvs (id, user_id, title, cv_data, selected_template, is_default, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, 0, ?, ?)
                """,
                (cv_id, user_id, title, json.dumps(cv_data.to_dict()),
                 CVTemplateType(template).value, now, now),
            )
            row = self._fetch(conn, cv_id, user_id)
        return self._row_to_cv(row)

    def update(self, cv_id: str, updates: CVUpdate) -> SavedCV:
        """Update the columns present in the patch and bump updated_at."""
        user_id = self._user_id()
        columns = []
        params = []
        if updates.has("title"):
            columns.append("title = ?")
            params.append(updates.title)
        if updates.has("cv_data"):
            columns.append("cv_data = ?")
            params.append(json.dumps(updates.cv_data.to_dict()))
        if updates.has("selected_template"):
            columns.append("selected_template = ?")
            params.append(CVTemplateType(updates.selected_template).value)
        columns.append("updated_at = ?")
        params.append(format_timestamp(self.clock()))

        with transaction(self.db_path) as conn:
            cursor = conn.execute(
                f"UPDATE cvs SET {', '.join(columns)} WHERE id = ? AND user_id = ?",
                (*params, cv_id, user_id),
            )
            if cursor.rowcount == 0:
                raise RepositoryError(f"CV not found: {cv_id}")
            row = self._fetch(conn, cv_id, user_id)
        return self._row_to_cv(row)

    def delete(self, cv_id: str) -> None:
        """Delete a CV."""
        user_id = self._user_id()
        with transaction(self.db_path) as conn:
            conn.execute("DELETE FROM cvs WHERE id = ? AND user_id = ?", (cv_id, user_id))

    def set_default(self, cv_id: str) -> None:
        """Unset every default of the user and set this one, in one transaction."""
        user_id = self._user_id()
        with transaction(self.db_path) as conn:
            conn.execute("UPDATE cvs SET is_default = 0 WHERE user_id = ?", (user_id,))
            cursor = conn.execute(
                "UPDATE cvs SET is_default = 1 WHERE id = ? AND user_id = ?", (cv_id, user_id)
            )
            if cursor.rowcount == 0:
                raise RepositoryError(f"CV not found: {cv_id}")

    def duplicate(self, cv_id: str) -> SavedCV:
        """Copy a CV under a new id; the copy is never the default."""
        original = self.get_by_id(cv_id)
        if original is None:
            raise RepositoryError(f"CV not found: {cv_id}")
        return self.create(f"{original.title}{COPY_SUFFIX}", original.cv_data, original.selected_template)
