"""Tests for enumerations, quotas, plan features and color presets."""

import pytest
from pydantic import ValidationError

from models.value_objects import (
    COLOR_PRESETS,
    FREE_LIMITS,
    FREE_TEMPLATES,
    PLAN_FEATURES,
    PREMIUM_LIMITS,
    PREMIUM_TEMPLATES,
    ColorPresetCategory,
    CVTemplateType,
    PresetColors,
    SubscriptionPlan,
    TemplateCategory,
    get_plan_features,
    get_preset_by_id,
    has_feature,
    is_free_template,
    limits_for_plan,
    presets_by_category,
    template_category,
)


def test_every_template_has_a_category():
    """Each template maps to one filter category."""
    for template in CVTemplateType:
        assert isinstance(template_category(template), TemplateCategory)
    assert template_category(CVTemplateType.MODERN) == TemplateCategory.PROFESSIONAL
    assert template_category("dublin") == TemplateCategory.ENTRY_LEVEL


def test_plan_limits():
    """Free and premium quotas per AI function."""
    assert limits_for_plan(SubscriptionPlan.FREE) == FREE_LIMITS
    assert limits_for_plan("premium") == PREMIUM_LIMITS
    assert FREE_LIMITS.limit_for("analyze") == 5
    assert FREE_LIMITS.limit_for("improve_text") == 20
    assert PREMIUM_LIMITS.limit_for("parse") == 100


def test_limit_for_unknown_function():
    with pytest.raises(KeyError):
        FREE_LIMITS.limit_for("translate")


def test_color_presets_lookup():
    """Presets are found by id and grouped by category."""
    assert len(COLOR_PRESETS) == 20
    assert len({preset.id for preset in COLOR_PRESETS}) == 20
    assert get_preset_by_id("corporate-blue").colors.primary == "#1e3a5f"
    assert get_preset_by_id("missing") is None
    bold = presets_by_category(ColorPresetCategory.BOLD)
    assert bold and all(preset.category == ColorPresetCategory.BOLD for preset in bold)


def test_preset_colors_reject_invalid_hex():
    with pytest.raises(ValidationError):
        PresetColors(primary="blue", accent="#3b82f6", text="#1f2937", background="#ffffff")
    with pytest.raises(ValidationError):
        PresetColors(primary="#2563eb\n", accent="#3b82f6", text="#1f2937", background="#ffffff")


def test_plan_features():
    """Free plan gets the two basic templates and one CV; premium unlocks everything."""
    free = get_plan_features(SubscriptionPlan.FREE)
    assert free.templates == 2
    assert free.max_cvs == 1
    assert free.watermark_free is False

    premium = get_plan_features("premium")
    assert premium is PLAN_FEATURES[SubscriptionPlan.PREMIUM]
    assert premium.templates == len(FREE_TEMPLATES) + len(PREMIUM_TEMPLATES) == 6
    assert premium.max_cvs is None


@pytest.mark.parametrize(
    "plan, feature, expected",
    [
        ("free", "ai_analysis", False),
        ("free", "job_matching", False),
        ("free", "max_cvs", True),
        ("premium", "watermark_free", True),
        ("premium", "version_history", True),
        ("premium", "max_cvs", True),
    ],
)
def test_has_feature(plan, feature, expected):
    assert has_feature(plan, feature) is expected


def test_has_feature_unknown():
    with pytest.raises(KeyError):
        has_feature(SubscriptionPlan.PREMIUM, "teleportation")


def test_plan_features_are_immutable():
    with pytest.raises(ValidationError):
        PLAN_FEATURES[SubscriptionPlan.FREE].ai_analysis = True


def test_free_templates():
    assert is_free_template(CVTemplateType.MODERN) is True
    assert is_free_template("classic") is True
    assert is_free_template(CVTemplateType.EXECUTIVE) is False
    assert is_free_template(CVTemplateType.BERLIN) is False
