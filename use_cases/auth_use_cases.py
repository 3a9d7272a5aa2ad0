"""Authentication use-cases."""

from dataclasses import dataclass
from typing import Any, Optional

from constants import Limits, Messages
from core.exceptions import AuthenticationError
from core.logger import get_logger
from models.auth_models import AuthCredentials, AuthSession, SignUpData, User
from models.validation import is_valid_email
from repositories.base import AuthRepository
from use_cases.error_translation import already_registered_as_conflict, validation_failed

logger = get_logger("use_cases")


def normalize_email(email: Any) -> str:
    """Validate and return the trimmed, lower-cased email."""
    if not isinstance(email, str) or not email.strip():
        raise validation_failed("Email is required", fields={"email": "Email cannot be empty"})
    email = email.strip()
    if not is_valid_email(email):
        raise validation_failed("Invalid email format", fields={"email": "Please enter a valid email address"})
    return email.lower()


@dataclass
class SignInInput:
    email: str
    password: str


@dataclass
class SignInOutput:
    session: AuthSession


class SignInUseCase:
    """Sign in with email and password.

    Every repository failure is reported as the same ValidationError so callers
    cannot tell an unknown account from a wrong password.
    """

    def __init__(self, auth_repository: AuthRepository):
        self.auth_repository = auth_repository

    def execute(self, request: SignInInput) -> SignInOutput:
        email = normalize_email(request.email)
        if not isinstance(request.password, str) or len(request.password) < Limits.PASSWORD_MIN:
            raise validation_failed(
                "Invalid password",
                fields={"password": f"Password must be at least {Limits.PASSWORD_MIN} characters"},
            )

        try:
            session = self.auth_repository.sign_in(AuthCredentials(email=email, password=request.password))
        except Exception as exc:
            logger.warning(f"Sign-in failed for {email}: {type(exc).__name__}")
            raise validation_failed(
                Messages.INVALID_CREDENTIALS,
                fields={"credentials": "Please check your email and password"},
            ) from exc

        logger.info(f"User signed in: {session.user.id}")
        return SignInOutput(session=session)


@dataclass
class SignUpInput:
    email: str
    password: str
    full_name: Optional[str] = None


@dataclass
class SignUpOutput:
    session: AuthSession


class SignUpUseCase:
    """Register a new account."""

    def __init__(self, auth_repository: AuthRepository):
        self.auth_repository = auth_repository

    def execute(self, request: SignUpInput) -> SignUpOutput:
        email = normalize_email(request.email)

        password = request.password
        if not isinstance(password, str) or not password:
            raise validation_failed("Password is required", fields={"password": "Password cannot be empty"})
        if len(password) < Limits.PASSWORD_MIN:
            raise validation_failed(
                "Password is too short",
                fields={"password": f"Password must be at least {Limits.PASSWORD_MIN} characters"},
            )
        if len(password) > Limits.PASSWORD_MAX:
            raise validation_failed(
                "Password is too long",
                fields={"password": f"Password must be {Limits.PASSWORD_MAX} characters or less"},
            )

        raw_name = request.full_name if isinstance(request.full_name, str) else None
        if raw_name and len(raw_name) > Limits.MAX_FULL_NAME_LENGTH:
            raise validation_failed(
                "Name is too long",
                fields={"fullName": f"Name must be {Limits.MAX_FULL_NAME_LENGTH} characters or less"},
            )
        full_name = raw_name.strip() if raw_name is not None else None

        data = SignUpData(email=email, password=password, full_name=full_name)
        with already_registered_as_conflict():
            session = self.auth_repository.sign_up(data)

        logger.info(f"User signed up: {session.user.id}")
        return SignUpOutput(session=session)


class SignOutUseCase:
    def __init__(self, auth_repository: AuthRepository):
        self.auth_repository = auth_repository

    def execute(self) -> None:
        self.auth_repository.sign_out()
        logger.info("User signed out")


@dataclass
class GetCurrentUserOutput:
    user: User


class GetCurrentUserUseCase:
    """Return the signed-in user or raise AuthenticationError."""

    def __init__(self, auth_repository: AuthRepository):
        self.auth_repository = auth_repository

    def execute(self) -> GetCurrentUserOutput:
        user = self.auth_repository.get_current_user()
        if user is None:
            raise AuthenticationError(Messages.NOT_SIGNED_IN)
        return GetCurrentUserOutput(user=user)
