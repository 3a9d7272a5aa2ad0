"""Abstract contracts the use-case layer depends on.

Concrete implementations (SQLite storage, Azure OpenAI agent) live in
``database`` and ``agents``; tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from models.ai_models import CVScore, ImproveTextResult, JobMatch
from models.auth_models import AuthCredentials, AuthSession, AuthStateCallback, AuthSubscription, SignUpData, User
from models.cv_models import CVData
from models.saved_cv import CVUpdate, SavedCV
from models.value_objects import CVTemplateType


class CVRepository(ABC):
    """Storage of the current user's CVs."""

    @abstractmethod
    def get_all(self) -> List[SavedCV]:
        """Get all CVs of the current user."""
        ...

    @abstractmethod
    def get_by_id(self, cv_id: str) -> Optional[SavedCV]:
        """Get one CV, or None when it does not exist."""
        ...

    @abstractmethod
    def create(self, title: str, cv_data: CVData, template: CVTemplateType) -> SavedCV:
        """Persist a new CV for the current user."""
        ...

    @abstractmethod
    def update(self, cv_id: str, updates: CVUpdate) -> SavedCV:
        """Apply the fields present in ``updates``; a supplied cv_data replaces the stored one."""
        ...

    @abstractmethod
    def delete(self, cv_id: str) -> None:
        ...

    @abstractmethod
    def set_default(self, cv_id: str) -> None:
        """Make ``cv_id`` the only default CV of its owner."""
        ...

    @abstractmethod
    def duplicate(self, cv_id: str) -> SavedCV:
        """Copy a CV under a new id with the title ``"<original> (Copy)"``."""
        ...


class AuthRepository(ABC):
    """Account and session provider."""

    @abstractmethod
    def sign_in(self, credentials: AuthCredentials) -> AuthSession:
        ...

    @abstractmethod
    def sign_up(self, data: SignUpData) -> AuthSession:
        """Register an account; fails with a message containing "already registered" for a taken email."""
        ...

    @abstractmethod
    def sign_out(self) -> None:
        ...

    @abstractmethod
    def get_current_user(self) -> Optional[User]:
        """Signed-in user, or None."""
        ...

    @abstractmethod
    def on_auth_state_change(self, callback: AuthStateCallback) -> AuthSubscription:
        """Register a listener for sign-in/sign-out events."""
        ...

    def is_authenticated(self) -> bool:
        return self.get_current_user() is not None


class AIService(ABC):
    """Black-box AI backend.

    Throttling is signalled by raising an exception whose message contains
    "rate limit".
    """

    @abstractmethod
    def score_cv(self, cv_data: CVData) -> CVScore:
        ...

    @abstractmethod
    def extract_from_text(self, text: str) -> Dict[str, Any]:
        """Extract a partial CV (camelCase keys) from free text."""
        ...

    @abstractmethod
    def match_job(self, cv_data: CVData, job_description: str) -> JobMatch:
        ...

    @abstractmethod
    def improve_text(self, text: str, context: str) -> ImproveTextResult:
        ...
