"""Static catalog routes: templates, color presets, AI quotas and plan features."""

from flask import jsonify, request

from core.exceptions import ValidationError
from models.value_objects import (
    COLOR_PRESETS,
    ColorPresetCategory,
    CVTemplateType,
    SubscriptionPlan,
    TemplateCategory,
    get_plan_features,
    is_free_template,
    limits_for_plan,
    presets_by_category,
    template_category,
)


def _enum_arg(name: str, enum_cls):
    value = request.args.get(name)
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(item.value for item in enum_cls)
        raise ValidationError(f"Invalid {name}", fields={name: f"Must be one of: {allowed}"}) from None


def register_catalog(app):
    """Register catalog routes."""

    @app.route("/api/templates")
    def list_templates():
        category = _enum_arg("category", TemplateCategory)
        templates = [
            {
                "id": template.value,
                "name": template.label,
                "category": template_category(template).value,
                "premium": not is_free_template(template),
            }
            for template in CVTemplateType
            if category is None or template_category(template) == category
        ]
        return jsonify({"templates": templates}), 200

    @app.route("/api/color-presets")
    def list_color_presets():
        category = _enum_arg("category", ColorPresetCategory)
        presets = COLOR_PRESETS if category is None else presets_by_category(category)
        return jsonify({"presets": [preset.model_dump(mode="json") for preset in presets]}), 200

    @app.route("/api/ai/limits")
    def ai_limits():
        plan = _enum_arg("plan", SubscriptionPlan) or SubscriptionPlan.FREE
        limits = limits_for_plan(plan)
        return jsonify({"plan": plan.value, "limits": limits.model_dump()}), 200

    @app.route("/api/plans/features")
    def plan_features():
        plan = _enum_arg("plan", SubscriptionPlan) or SubscriptionPlan.FREE
        features = get_plan_features(plan)
        return jsonify({"plan": plan.value, "features": features.model_dump()}), 200
