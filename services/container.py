"""Wires repositories and the AI service into use-cases."""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from core.logger import get_logger
from database.cvs import SQLiteCVRepository
from database.users import SQLiteAuthRepository
from models.ai_models import CVScore, ImproveTextResult, JobMatch
from models.cv_models import CVData
from repositories.base import AIService, AuthRepository, CVRepository
from use_cases import (
    AnalyzeCVUseCase,
    CreateCVUseCase,
    DeleteCVUseCase,
    DuplicateCVUseCase,
    ExportCVUseCase,
    GetCurrentUserUseCase,
    GetCVByIdUseCase,
    GetUserCVsUseCase,
    ImproveTextUseCase,
    MatchJobUseCase,
    ParseCVTextUseCase,
    SetDefaultCVUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
    UpdateCVUseCase,
)

logger = get_logger("services")


def _default_ai_service() -> AIService:
    from agents.cv_ai_agent import CVAIAgent

    return CVAIAgent()


class _DeferredAIService(AIService):
    """Resolves the container's AI service on the first call, after input validation."""

    def __init__(self, container: "Container"):
        self._container = container

    def score_cv(self, cv_data: CVData) -> CVScore:
        return self._container.ai_service.score_cv(cv_data)

    def extract_from_text(self, text: str) -> Dict[str, Any]:
        return self._container.ai_service.extract_from_text(text)

    def match_job(self, cv_data: CVData, job_description: str) -> JobMatch:
        return self._container.ai_service.match_job(cv_data, job_description)

    def improve_text(self, text: str, context: str) -> ImproveTextResult:
        return self._container.ai_service.improve_text(text, context)


class Container:
    """
    Holds one client's repositories and builds use-cases on demand.

    The AI service is created on first use, so CV and auth operations work
    without Azure OpenAI credentials.
    """

    def __init__(
        self,
        cv_repository: CVRepository,
        auth_repository: AuthRepository,
        ai_service: Optional[AIService] = None,
        ai_service_factory: Callable[[], AIService] = _default_ai_service,
    ):
        self.cv_repository = cv_repository
        self.auth_repository = auth_repository
        self._ai_service = ai_service
        self._ai_service_factory = ai_service_factory

    @classmethod
    def from_settings(
        cls,
        access_token: Optional[str] = None,
        db_path: Optional[Path] = None,
        ai_service: Optional[AIService] = None,
        ai_service_factory: Callable[[], AIService] = _default_ai_service,
    ) -> "Container":
        """Build a container backed by the SQLite database."""
        auth_repository = SQLiteAuthRepository(db_path=db_path, access_token=access_token)
        cv_repository = SQLiteCVRepository(
            user_id_provider=auth_repository.current_user_id,
            db_path=db_path,
        )
        return cls(cv_repository, auth_repository, ai_service=ai_service, ai_service_factory=ai_service_factory)

    @property
    def ai_service(self) -> AIService:
        if self._ai_service is None:
            logger.info("Initializing AI service")
            self._ai_service = self._ai_service_factory()
        return self._ai_service

    # CV management
    @property
    def create_cv(self) -> CreateCVUseCase:
        return CreateCVUseCase(self.cv_repository)

    @property
    def get_cv_by_id(self) -> GetCVByIdUseCase:
        return GetCVByIdUseCase(self.cv_repository)

    @property
    def get_user_cvs(self) -> GetUserCVsUseCase:
        return GetUserCVsUseCase(self.cv_repository)

    @property
    def update_cv(self) -> UpdateCVUseCase:
        return UpdateCVUseCase(self.cv_repository)

    @property
    def delete_cv(self) -> DeleteCVUseCase:
        return DeleteCVUseCase(self.cv_repository)

    @property
    def duplicate_cv(self) -> DuplicateCVUseCase:
        return DuplicateCVUseCase(self.cv_repository)

    @property
    def set_default_cv(self) -> SetDefaultCVUseCase:
        return SetDefaultCVUseCase(self.cv_repository)

    @property
    def export_cv(self) -> ExportCVUseCase:
        return ExportCVUseCase(self.cv_repository)

    # Authentication
    @property
    def sign_in(self) -> SignInUseCase:
        return SignInUseCase(self.auth_repository)

    @property
    def sign_up(self) -> SignUpUseCase:
        return SignUpUseCase(self.auth_repository)

    @property
    def sign_out(self) -> SignOutUseCase:
        return SignOutUseCase(self.auth_repository)

    @property
    def get_current_user(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(self.auth_repository)

    # AI
    @property
    def analyze_cv(self) -> AnalyzeCVUseCase:
        return AnalyzeCVUseCase(_DeferredAIService(self))

    @property
    def parse_cv_text(self) -> ParseCVTextUseCase:
        return ParseCVTextUseCase(_DeferredAIService(self))

    @property
    def match_job(self) -> MatchJobUseCase:
        return MatchJobUseCase(_DeferredAIService(self))

    @property
    def improve_text(self) -> ImproveTextUseCase:
        return ImproveTextUseCase(_DeferredAIService(self))
