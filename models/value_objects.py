"""Closed enumerations and small immutable records used across the CV domain."""

import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillLevel(str, Enum):
    """Skill proficiency level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LanguageProficiency(str, Enum):
    """Spoken language proficiency."""

    BASIC = "basic"
    CONVERSATIONAL = "conversational"
    PROFESSIONAL = "professional"
    NATIVE = "native"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class CVTemplateType(str, Enum):
    """Visual templates a saved CV can be rendered with."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    CREATIVE = "creative"
    EXECUTIVE = "executive"
    TECHNICAL = "technical"
    # Sector templates
    BERLIN = "berlin"
    MANHATTAN = "manhattan"
    STOCKHOLM = "stockholm"
    TOKYO = "tokyo"
    DUBLIN = "dublin"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class TemplateCategory(str, Enum):
    """Template filter categories."""

    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    ACADEMIC = "academic"
    ENTRY_LEVEL = "entry-level"


TEMPLATE_CATEGORIES: Dict[CVTemplateType, TemplateCategory] = {
    CVTemplateType.MODERN: TemplateCategory.PROFESSIONAL,
    CVTemplateType.CLASSIC: TemplateCategory.PROFESSIONAL,
    CVTemplateType.MINIMAL: TemplateCategory.CREATIVE,
    CVTemplateType.CREATIVE: TemplateCategory.CREATIVE,
    CVTemplateType.EXECUTIVE: TemplateCategory.PROFESSIONAL,
    CVTemplateType.TECHNICAL: TemplateCategory.PROFESSIONAL,
    CVTemplateType.BERLIN: TemplateCategory.PROFESSIONAL,
    CVTemplateType.MANHATTAN: TemplateCategory.PROFESSIONAL,
    CVTemplateType.STOCKHOLM: TemplateCategory.CREATIVE,
    CVTemplateType.TOKYO: TemplateCategory.ACADEMIC,
    CVTemplateType.DUBLIN: TemplateCategory.ENTRY_LEVEL,
}


def template_category(template: CVTemplateType) -> TemplateCategory:
    """Get the filter category of a template."""
    return TEMPLATE_CATEGORIES[CVTemplateType(template)]


class SectionKey(str, Enum):
    """Optional CV sections that can be hidden and reordered."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    LANGUAGES = "languages"
    CERTIFICATES = "certificates"


class ExportFormat(str, Enum):
    """Export targets accepted by the export use-case."""

    PDF = "pdf"
    DOCX = "docx"
    JSON = "json"


class CVCreationMode(str, Enum):
    """How the user started building a CV."""

    STRUCTURED = "structured"
    AI_TEXT = "ai-text"
    LINKEDIN = "linkedin"


class SubscriptionPlan(str, Enum):
    """Subscription plans gating premium features."""

    FREE = "free"
    PREMIUM = "premium"


class AIUsageLimits(BaseModel):
    """Daily quota per AI function."""

    model_config = ConfigDict(frozen=True)

    analyze: int = Field(..., ge=0)
    parse: int = Field(..., ge=0)
    match_job: int = Field(..., ge=0)
    improve_text: int = Field(..., ge=0)

    def limit_for(self, function_name: str) -> int:
        """Get the quota of one AI function (``analyze``, ``parse``, ``match_job``, ``improve_text``)."""
        if function_name not in type(self).model_fields:
            raise KeyError(f"Unknown AI function: {function_name}")
        return getattr(self, function_name)


FREE_LIMITS = AIUsageLimits(analyze=5, parse=10, match_job=5, improve_text=20)
PREMIUM_LIMITS = AIUsageLimits(analyze=50, parse=100, match_job=50, improve_text=200)


def limits_for_plan(plan: SubscriptionPlan) -> AIUsageLimits:
    """Get AI quotas for a subscription plan."""
    if SubscriptionPlan(plan) == SubscriptionPlan.PREMIUM:
        return PREMIUM_LIMITS
    return FREE_LIMITS


class PlanFeatures(BaseModel):
    """What a subscription plan unlocks."""

    model_config = ConfigDict(frozen=True)

    templates: int = Field(..., ge=0, description="Number of templates available")
    max_cvs: Optional[int] = Field(None, ge=1, description="Saved CV cap (None = unlimited)")
    ai_analysis: bool = False
    ai_text_parsing: bool = False
    linkedin_import: bool = False
    job_matching: bool = False
    version_history: bool = False
    watermark_free: bool = False
    priority_support: bool = False


FREE_TEMPLATES = (CVTemplateType.MODERN, CVTemplateType.CLASSIC)
PREMIUM_TEMPLATES = (
    CVTemplateType.MINIMAL,
    CVTemplateType.CREATIVE,
    CVTemplateType.EXECUTIVE,
    CVTemplateType.TECHNICAL,
)

PLAN_FEATURES: Dict[SubscriptionPlan, PlanFeatures] = {
    SubscriptionPlan.FREE: PlanFeatures(templates=len(FREE_TEMPLATES), max_cvs=1),
    SubscriptionPlan.PREMIUM: PlanFeatures(
        templates=len(FREE_TEMPLATES) + len(PREMIUM_TEMPLATES),
        max_cvs=None,
        ai_analysis=True,
        ai_text_parsing=True,
        linkedin_import=True,
        job_matching=True,
        version_history=True,
        watermark_free=True,
        priority_support=True,
    ),
}


def get_plan_features(plan: SubscriptionPlan) -> PlanFeatures:
    return PLAN_FEATURES[SubscriptionPlan(plan)]


def has_feature(plan: SubscriptionPlan, feature: str) -> bool:
    """Whether ``plan`` unlocks ``feature`` (a PlanFeatures field name)."""
    if feature not in PlanFeatures.model_fields:
        raise KeyError(f"Unknown plan feature: {feature}")
    value = getattr(get_plan_features(plan), feature)
    # max_cvs=None is unlimited
    return value is None or bool(value)


def is_free_template(template: CVTemplateType) -> bool:
    """Only the free templates are usable without a premium plan."""
    return CVTemplateType(template) in FREE_TEMPLATES


HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ColorPresetCategory(str, Enum):
    """Color preset groups."""

    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    MINIMAL = "minimal"
    BOLD = "bold"


class PresetColors(BaseModel):
    """Template palette."""

    model_config = ConfigDict(frozen=True)

    primary: str
    accent: str
    text: str
    background: str

    @field_validator("primary", "accent", "text", "background")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        if not HEX_COLOR_RE.fullmatch(value):
            raise ValueError("Invalid color format")
        return value


class ColorPreset(BaseModel):
    """Named palette offered by the template customizer."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    colors: PresetColors
    category: ColorPresetCategory


def _preset(preset_id: str, name: str, primary: str, accent: str, category: ColorPresetCategory,
            text: str = "#1f2937") -> ColorPreset:
    return ColorPreset(
        id=preset_id,
        name=name,
        colors=PresetColors(primary=primary, accent=accent, text=text, background="#ffffff"),
        category=category,
    )


COLOR_PRESETS: List[ColorPreset] = [
    _preset("corporate-blue", "Corporate Blue", "#1e3a5f", "#3b82f6", ColorPresetCategory.PROFESSIONAL),
    _preset("teal-modern", "Teal Modern", "#0d9488", "#14b8a6", ColorPresetCategory.PROFESSIONAL),
    _preset("wine", "Wine", "#7f1d1d", "#b91c1c", ColorPresetCategory.PROFESSIONAL),
    _preset("navy-gold", "Navy Gold", "#1e3a5f", "#d97706", ColorPresetCategory.PROFESSIONAL),
    _preset("charcoal-burgundy", "Charcoal Burgundy", "#374151", "#881337", ColorPresetCategory.PROFESSIONAL),
    _preset("sunset", "Sunset", "#9a3412", "#ea580c", ColorPresetCategory.CREATIVE),
    _preset("lavender", "Lavender", "#6b21a8", "#a855f7", ColorPresetCategory.CREATIVE),
    _preset("ocean-breeze", "Ocean Breeze", "#0369a1", "#38bdf8", ColorPresetCategory.CREATIVE),
    _preset("rose-gold", "Rose Gold", "#be185d", "#f472b6", ColorPresetCategory.CREATIVE),
    _preset("coral", "Coral", "#dc2626", "#fb7185", ColorPresetCategory.CREATIVE),
    _preset("charcoal", "Charcoal", "#374151", "#6b7280", ColorPresetCategory.MINIMAL),
    _preset("forest", "Forest", "#064e3b", "#059669", ColorPresetCategory.MINIMAL),
    _preset("slate", "Slate", "#334155", "#64748b", ColorPresetCategory.MINIMAL),
    _preset("stone", "Stone", "#44403c", "#78716c", ColorPresetCategory.MINIMAL),
    _preset("neutral", "Neutral", "#404040", "#737373", ColorPresetCategory.MINIMAL, text="#171717"),
    _preset("midnight", "Midnight", "#1e1b4b", "#4f46e5", ColorPresetCategory.BOLD),
    _preset("electric-blue", "Electric Blue", "#1d4ed8", "#3b82f6", ColorPresetCategory.BOLD),
    _preset("emerald", "Emerald", "#047857", "#10b981", ColorPresetCategory.BOLD),
    _preset("ruby", "Ruby", "#be123c", "#f43f5e", ColorPresetCategory.BOLD),
    _preset("amber", "Amber", "#b45309", "#f59e0b", ColorPresetCategory.BOLD),
]


def presets_by_category(category: ColorPresetCategory) -> List[ColorPreset]:
    """Get presets belonging to one category."""
    category = ColorPresetCategory(category)
    return [preset for preset in COLOR_PRESETS if preset.category == category]


def get_preset_by_id(preset_id: str) -> Optional[ColorPreset]:
    """Get preset by id, or None."""
    for preset in COLOR_PRESETS:
        if preset.id == preset_id:
            return preset
    return None
