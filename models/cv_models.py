"""Pydantic models for CV data structure.

Models only describe structure (types and closed enumerations) so that a
half-filled CV can exist while the user is still editing it. Business rules
such as required names or email shape live in ``models.validation``.
"""

from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.value_objects import LanguageProficiency, SectionKey, SkillLevel
from utils.ids import IdFactory, generate_id

EntityT = TypeVar("EntityT", bound="CVModel")


class CVModel(BaseModel):
    """Base model: snake_case attributes, camelCase wire format."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        revalidate_instances="always",
    )

    def to_dict(self) -> dict:
        """Serialize to the camelCase JSON shape used by storage and the API."""
        return self.model_dump(mode="json", by_alias=True)


class PersonalInfo(CVModel):
    """Personal and contact details. Always rendered."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    title: str = ""
    photo: str = ""


class Experience(CVModel):
    """Work experience entry."""

    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    description: str = ""
    achievements: List[str] = Field(default_factory=list)


class Education(CVModel):
    """Education entry."""

    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    gpa: str = ""
    description: str = ""


class Skill(CVModel):
    """Skill entry."""

    id: str
    name: str = ""
    level: SkillLevel = SkillLevel.INTERMEDIATE


class Language(CVModel):
    """Spoken language entry."""

    id: str
    name: str = ""
    proficiency: LanguageProficiency = LanguageProficiency.CONVERSATIONAL


class Certificate(CVModel):
    """Certificate entry."""

    id: str
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""


class SectionVisibility(CVModel):
    """Visibility flag per optional section. Personal info is always visible."""

    model_config = ConfigDict(extra="ignore")

    summary: bool = True
    experience: bool = True
    education: bool = True
    skills: bool = True
    languages: bool = True
    certificates: bool = True


class SectionOrderItem(CVModel):
    """Position of one optional section in the rendered CV."""

    id: SectionKey
    order: int


def default_section_order() -> List[SectionOrderItem]:
    """Sections in declaration order."""
    return [SectionOrderItem(id=key, order=index) for index, key in enumerate(SectionKey)]


class CVData(CVModel):
    """Complete CV data structure (aggregate root)."""

    personal_info: PersonalInfo
    summary: str
    experience: List[Experience]
    education: List[Education]
    skills: List[Skill]
    languages: List[Language]
    certificates: List[Certificate]
    section_visibility: SectionVisibility
    section_order: List[SectionOrderItem]


class CVVersion(CVModel):
    """Snapshot of a CV kept in the version history."""

    id: str
    timestamp: datetime
    label: str = Field(..., min_length=1)
    data: CVData


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _with_id(data: Optional[Mapping[str, Any]], fields: Mapping[str, Any], id_factory: IdFactory) -> dict:
    values = dict(data or {})
    values.update(fields)
    if values.get("id") is None:
        values["id"] = id_factory()
    return values


def create_personal_info(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> PersonalInfo:
    """Create personal info; unspecified fields are empty strings."""
    values = dict(data or {})
    values.update(fields)
    return PersonalInfo.model_validate(values)


def create_experience(
    data: Optional[Mapping[str, Any]] = None,
    id_factory: IdFactory = generate_id,
    **fields: Any,
) -> Experience:
    """
    Create an experience entry.

    Args:
        data: Partial record (snake_case or camelCase keys)
        id_factory: Called for a fresh id when none is supplied
        **fields: Field overrides applied on top of ``data``

    Returns:
        Fully populated Experience; a supplied id is kept verbatim
    """
    return Experience.model_validate(_with_id(data, fields, id_factory))


def create_education(
    data: Optional[Mapping[str, Any]] = None,
    id_factory: IdFactory = generate_id,
    **fields: Any,
) -> Education:
    """Create an education entry (same id rules as create_experience)."""
    return Education.model_validate(_with_id(data, fields, id_factory))


def create_skill(
    data: Optional[Mapping[str, Any]] = None,
    id_factory: IdFactory = generate_id,
    **fields: Any,
) -> Skill:
    """Create a skill; level defaults to intermediate."""
    return Skill.model_validate(_with_id(data, fields, id_factory))


def create_language(
    data: Optional[Mapping[str, Any]] = None,
    id_factory: IdFactory = generate_id,
    **fields: Any,
) -> Language:
    """Create a language; proficiency defaults to conversational."""
    return Language.model_validate(_with_id(data, fields, id_factory))


def create_certificate(
    data: Optional[Mapping[str, Any]] = None,
    id_factory: IdFactory = generate_id,
    **fields: Any,
) -> Certificate:
    """Create a certificate entry."""
    return Certificate.model_validate(_with_id(data, fields, id_factory))


def create_cv_data(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> CVData:
    """Create CV data, filling every missing section with its empty default."""
    values = dict(data or {})
    values.update(fields)

    def pick(name: str, default: Callable[[], Any]) -> Any:
        alias = to_camel(name)
        if values.get(name) is not None:
            return values[name]
        if values.get(alias) is not None:
            return values[alias]
        return default()

    return CVData(
        personal_info=pick("personal_info", PersonalInfo),
        summary=pick("summary", str),
        experience=pick("experience", list),
        education=pick("education", list),
        skills=pick("skills", list),
        languages=pick("languages", list),
        certificates=pick("certificates", list),
        section_visibility=pick("section_visibility", SectionVisibility),
        section_order=pick("section_order", default_section_order),
    )


def create_cv_version(
    data: CVData,
    label: Optional[str] = None,
    id_factory: IdFactory = generate_id,
    clock: Callable[[], datetime] = datetime.now,
) -> CVVersion:
    """Snapshot CV data with a timestamp label."""
    timestamp = clock()
    return CVVersion(
        id=id_factory(),
        timestamp=timestamp,
        label=label or f"Version {timestamp:%Y-%m-%d %H:%M:%S}",
        data=data.model_copy(deep=True),
    )


def sort_versions(versions: List[CVVersion]) -> List[CVVersion]:
    """Oldest snapshot first."""
    return sorted(versions, key=lambda version: version.timestamp)


INITIAL_CV_DATA: CVData = create_cv_data()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def update_entity(entity: EntityT, updates: Mapping[str, Any]) -> EntityT:
    """Return a copy of ``entity`` with ``updates`` applied and re-validated."""
    model_cls = type(entity)
    values = entity.model_dump(by_alias=True)
    for key, value in updates.items():
        field_info = model_cls.model_fields.get(key)
        values[field_info.alias if field_info is not None and field_info.alias else key] = value
    return model_cls.model_validate(values)


def toggle_section_visibility(cv_data: CVData, section: SectionKey) -> CVData:
    """Flip the visibility flag of one optional section."""
    name = SectionKey(section).value
    visibility = cv_data.section_visibility.model_copy(
        update={name: not getattr(cv_data.section_visibility, name)}
    )
    return cv_data.model_copy(update={"section_visibility": visibility})


def update_section_order(cv_data: CVData, new_order: List[SectionOrderItem]) -> CVData:
    """Replace the section order."""
    return cv_data.model_copy(update={"section_order": list(new_order)})


def has_content(cv_data: CVData) -> bool:
    """True when the CV holds anything worth analyzing."""
    return bool(
        cv_data.personal_info.full_name.strip()
        or cv_data.summary.strip()
        or cv_data.experience
        or cv_data.education
        or cv_data.skills
    )


def is_complete(cv_data: CVData) -> bool:
    """True when the CV has everything required for export."""
    info = cv_data.personal_info
    has_personal_info = bool(info.full_name and info.email and info.phone)
    return bool(
        has_personal_info
        and cv_data.summary
        and cv_data.experience
        and cv_data.education
    )
