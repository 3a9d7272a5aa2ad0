"""Pytest configuration and shared fixtures."""

import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.ai_models import CVScore, ImproveTextResult, JobMatch, ScoreBreakdown  # noqa: E402
from models.auth_models import AuthEvent, AuthSession, AuthSubscription, User  # noqa: E402
from models.saved_cv import SavedCV  # noqa: E402
from repositories.base import AIService, AuthRepository, CVRepository  # noqa: E402
from utils.ids import sequential_ids  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def use_test_database():
    """Use a temporary database file for the whole test session (before app is imported)."""
    tmp_dir = Path(tempfile.mkdtemp(prefix="cv_builder_test_"))
    test_db_path = tmp_dir / "data" / "cv_builder.db"

    from config import settings
    from database.db import init_db

    original_path = settings.database_path
    settings.database_path = str(test_db_path)
    init_db()

    yield test_db_path

    settings.database_path = original_path


@pytest.fixture
def db_path(tmp_path):
    """Fresh, initialized database file for one test."""
    from database.db import init_db

    path = tmp_path / "cv_builder.db"
    init_db(path)
    return path


class Clock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


class InMemoryCVRepository(CVRepository):
    """CV repository keeping records in a dict and logging every call."""

    def __init__(self, user_id: str = "user-1"):
        self.user_id = user_id
        self.cvs: Dict[str, SavedCV] = {}
        self.calls: List[tuple] = []
        self.next_id = sequential_ids("cv")
        self.clock = Clock()

    def get_all(self) -> List[SavedCV]:
        self.calls.append(("get_all",))
        return list(self.cvs.values())

    def get_by_id(self, cv_id: str) -> Optional[SavedCV]:
        self.calls.append(("get_by_id", cv_id))
        return self.cvs.get(cv_id)

    def create(self, title, cv_data, template) -> SavedCV:
        self.calls.append(("create", title, cv_data, template))
        now = self.clock()
        cv = SavedCV(
            id=self.next_id(),
            user_id=self.user_id,
            title=title,
            cv_data=cv_data,
            selected_template=template,
            created_at=now,
            updated_at=now,
        )
        self.cvs[cv.id] = cv
        return cv

    def update(self, cv_id, updates) -> SavedCV:
        self.calls.append(("update", cv_id, updates))
        cv = self.cvs[cv_id].model_copy(update={**updates.changes(), "updated_at": self.clock()})
        self.cvs[cv_id] = cv
        return cv

    def delete(self, cv_id) -> None:
        self.calls.append(("delete", cv_id))
        del self.cvs[cv_id]

    def set_default(self, cv_id) -> None:
        self.calls.append(("set_default", cv_id))
        for key, cv in self.cvs.items():
            self.cvs[key] = cv.model_copy(update={"is_default": key == cv_id})

    def duplicate(self, cv_id) -> SavedCV:
        self.calls.append(("duplicate", cv_id))
        original = self.cvs[cv_id]
        now = self.clock()
        copy = original.model_copy(
            update={
                "id": self.next_id(),
                "title": f"{original.title} (Copy)",
                "is_default": False,
                "created_at": now,
                "updated_at": now,
            },
            deep=True,
        )
        self.cvs[copy.id] = copy
        return copy

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


class InMemoryAuthRepository(AuthRepository):
    """Auth repository with a dict of accounts; ``error`` is raised by sign-in/sign-up when set."""

    def __init__(self):
        self.accounts: Dict[str, tuple] = {}
        self.current: Optional[AuthSession] = None
        self.calls: List[tuple] = []
        self.error: Optional[Exception] = None
        self.listeners = []
        self.next_id = sequential_ids("user")

    def _notify(self, event, session):
        for callback in list(self.listeners):
            callback(event, session)

    def sign_in(self, credentials) -> AuthSession:
        self.calls.append(("sign_in", credentials))
        if self.error:
            raise self.error
        account = self.accounts.get(credentials.email)
        if account is None or account[1] != credentials.password:
            raise Exception("Invalid login credentials")
        self.current = AuthSession(user=account[0], access_token="access", refresh_token="refresh")
        self._notify(AuthEvent.SIGNED_IN, self.current)
        return self.current

    def sign_up(self, data) -> AuthSession:
        self.calls.append(("sign_up", data))
        if self.error:
            raise self.error
        if data.email in self.accounts:
            raise Exception("User already registered")
        user = User(id=self.next_id(), email=data.email, full_name=data.full_name, created_at=datetime(2024, 1, 1))
        self.accounts[data.email] = (user, data.password)
        self.current = AuthSession(user=user, access_token="access", refresh_token="refresh")
        self._notify(AuthEvent.SIGNED_IN, self.current)
        return self.current

    def sign_out(self) -> None:
        self.calls.append(("sign_out",))
        self.current = None
        self._notify(AuthEvent.SIGNED_OUT, None)

    def get_current_user(self) -> Optional[User]:
        return self.current.user if self.current else None

    def on_auth_state_change(self, callback) -> AuthSubscription:
        self.listeners.append(callback)
        return AuthSubscription(lambda: self.listeners.remove(callback))


class FakeAIService(AIService):
    """AI service returning canned results; ``error`` is raised by every call when set."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.error: Optional[Exception] = None
        self.score = CVScore(
            overall=78,
            breakdown=ScoreBreakdown(completeness=80, quality=75, ats_compatibility=82, impact=70),
            recommendations=["Quantify your achievements"],
        )
        self.match = JobMatch(
            score=64,
            matched_keywords=["Python"],
            missing_keywords=["Kubernetes"],
            suggestions=["Mention container experience"],
        )
        self.extracted = {"personalInfo": {"fullName": "Jane Doe"}, "summary": "Backend developer"}
        self.improved = ImproveTextResult(
            improved_text="Led a team of five engineers", explanation="Stronger verb", key_changes=["verb"]
        )

    def _record(self, *call):
        self.calls.append(call)
        if self.error:
            raise self.error

    def score_cv(self, cv_data) -> CVScore:
        self._record("score_cv", cv_data)
        return self.score

    def extract_from_text(self, text):
        self._record("extract_from_text", text)
        return self.extracted

    def match_job(self, cv_data, job_description) -> JobMatch:
        self._record("match_job", cv_data, job_description)
        return self.match

    def improve_text(self, text, context) -> ImproveTextResult:
        self._record("improve_text", text, context)
        return self.improved


def make_cv_data(**overrides) -> dict:
    """Complete, valid CV in its camelCase wire shape."""
    data = {
        "personalInfo": {
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "+48 600 100 200",
            "location": "Warsaw",
            "linkedin": "",
            "website": "",
            "github": "",
            "title": "Backend Developer",
        },
        "summary": "Backend developer with six years of Python experience.",
        "experience": [
            {
                "id": "exp-1",
                "company": "Acme",
                "position": "Senior Developer",
                "startDate": "2020-01",
                "endDate": None,
                "current": True,
                "description": "Payments platform",
                "achievements": ["Cut latency by 40%"],
            }
        ],
        "education": [
            {
                "id": "edu-1",
                "institution": "Warsaw University of Technology",
                "degree": "MSc",
                "field": "Computer Science",
                "startDate": "2013-10",
                "endDate": "2018-06",
                "current": False,
            }
        ],
        "skills": [{"id": "skill-1", "name": "Python", "level": "expert"}],
        "languages": [{"id": "lang-1", "name": "English", "proficiency": "professional"}],
        "certificates": [],
        "sectionVisibility": {
            "summary": True,
            "experience": True,
            "education": True,
            "skills": True,
            "languages": True,
            "certificates": True,
        },
        "sectionOrder": [
            {"id": "summary", "order": 0},
            {"id": "experience", "order": 1},
            {"id": "education", "order": 2},
            {"id": "skills", "order": 3},
            {"id": "languages", "order": 4},
            {"id": "certificates", "order": 5},
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def cv_data() -> dict:
    return make_cv_data()


@pytest.fixture
def cv_repository():
    return InMemoryCVRepository()


@pytest.fixture
def auth_repository():
    return InMemoryAuthRepository()


@pytest.fixture
def ai_service():
    return FakeAIService()


@pytest.fixture
def app(db_path, ai_service):
    """Flask application on a fresh database with the fake AI service."""
    from app import create_app
    from services.container import Container

    def container_factory(access_token):
        return Container.from_settings(access_token=access_token, db_path=db_path, ai_service=ai_service)

    flask_app = create_app(container_factory=container_factory, db_path=db_path)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def signed_in_client(client):
    """Test client with a freshly registered account."""
    response = client.post(
        "/api/auth/signup",
        json={"email": "jane@example.com", "password": "secret123", "fullName": "Jane Doe"},
    )
    assert response.status_code == 201
    return client
