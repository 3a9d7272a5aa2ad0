"""Persisted CV record and its partial-update patch."""

from datetime import datetime
from typing import Any, Dict, Optional

from models.cv_models import CVData, CVModel
from models.value_objects import CVTemplateType


class _Unset:
    """Marker for an input field the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    """True unless ``value`` is the UNSET marker (None counts as set)."""
    return value is not UNSET


class SavedCV(CVModel):
    """A CV owned by one user.

    At most one CV per user has ``is_default`` set; the repository keeps that
    invariant, the record itself does not.
    """

    id: str
    user_id: str
    title: str
    cv_data: CVData
    selected_template: CVTemplateType
    is_default: bool = False
    created_at: datetime
    updated_at: datetime


class CVUpdate(CVModel):
    """Patch applied by ``CVRepository.update``.

    Presence is explicit: a field is part of the patch only when it was passed
    to the constructor (``has``), independent of its value.
    """

    title: Optional[str] = None
    cv_data: Optional[CVData] = None
    selected_template: Optional[CVTemplateType] = None

    def has(self, name: str) -> bool:
        return name in self.model_fields_set

    def changes(self) -> Dict[str, Any]:
        """Supplied fields only, by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def is_empty(self) -> bool:
        return not self.model_fields_set
