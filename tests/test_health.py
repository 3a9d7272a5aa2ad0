"""Tests for health and catalog endpoints."""


def test_health_returns_200(client):
    """GET /health should return 200."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_templates_list(client):
    response = client.get("/api/templates")
    assert response.status_code == 200
    templates = response.get_json()["templates"]
    assert len(templates) == 11
    assert {"id": "modern", "name": "Modern", "category": "professional", "premium": False} in templates
    assert {"id": "tokyo", "name": "Tokyo", "category": "academic", "premium": True} in templates


def test_templates_filtered_by_category(client):
    response = client.get("/api/templates?category=academic")
    assert [template["id"] for template in response.get_json()["templates"]] == ["tokyo"]


def test_templates_unknown_category(client):
    response = client.get("/api/templates?category=fancy")
    assert response.status_code == 400
    assert response.get_json()["error"] == "VALIDATION_ERROR"


def test_color_presets(client):
    response = client.get("/api/color-presets?category=minimal")
    assert response.status_code == 200
    presets = response.get_json()["presets"]
    assert presets and all(preset["category"] == "minimal" for preset in presets)


def test_ai_limits(client):
    response = client.get("/api/ai/limits?plan=premium")
    assert response.get_json() == {
        "plan": "premium",
        "limits": {"analyze": 50, "parse": 100, "match_job": 50, "improve_text": 200},
    }


def test_plan_features(client):
    response = client.get("/api/plans/features")
    body = response.get_json()
    assert response.status_code == 200
    assert body["plan"] == "free"
    assert body["features"]["templates"] == 2
    assert body["features"]["watermark_free"] is False

    premium = client.get("/api/plans/features?plan=premium").get_json()["features"]
    assert premium["max_cvs"] is None
    assert premium["job_matching"] is True


def test_plan_features_unknown_plan(client):
    response = client.get("/api/plans/features?plan=gold")
    assert response.status_code == 400
    assert response.get_json()["fields"] == {"plan": "Must be one of: free, premium"}
