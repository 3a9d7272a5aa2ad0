"""Pydantic models for accounts and sessions."""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from pydantic import Field

from models.cv_models import CVModel


class User(CVModel):
    """Authenticated account."""

    id: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime


class AuthCredentials(CVModel):
    """Sign-in credentials."""

    email: str
    password: str = Field(..., repr=False)


class SignUpData(AuthCredentials):
    """Sign-up payload."""

    full_name: Optional[str] = None


class AuthSession(CVModel):
    """Session issued on sign-in or sign-up."""

    user: User
    access_token: str = Field(..., repr=False)
    refresh_token: str = Field(..., repr=False)


class AuthEvent(str, Enum):
    """Auth state transitions reported to subscribers."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


AuthStateCallback = Callable[[AuthEvent, Optional[AuthSession]], None]


class AuthSubscription:
    """Handle returned by ``AuthRepository.on_auth_state_change``."""

    def __init__(self, unsubscribe: Callable[[], None]):
        self._unsubscribe = unsubscribe
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._unsubscribe()
            self.active = False
