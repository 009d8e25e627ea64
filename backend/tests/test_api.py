import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_slop_detector
from config import settings
from main import app
from models.schemas.slop_penalty import SlopPenalty

pytestmark = pytest.mark.api

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["lexicon_terms"] == 40


def test_validate():
    response = client.post(
        "/validate",
        json={"text": "We need an aggressive rockstar for a fast-paced team."},
    )
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["score"] <= 100
    assert data["grade"] in ("A", "B", "C", "D", "F")
    assert data["posting_type"] == "external"
    terms = [w["term"] for w in data["warnings"]]
    assert terms == ["aggressive", "rockstar", "fast-paced"]
    categories = data["categories"]
    assert sum(categories[k]["score"] for k in ("length", "inclusivity", "culture", "transparency")) == data["score"]


def test_validate_empty_text():
    response = client.post("/validate", json={"text": ""})
    assert response.status_code == 200
    assert response.json()["score"] == 70


def test_validate_internal_posting():
    response = client.post("/validate", json={"text": "Short note.", "posting_type": "internal"})
    assert response.status_code == 200
    data = response.json()
    assert data["posting_type"] == "internal"
    assert data["dimensions"]["compensation"]["skipped"] is True


def test_validate_rejects_unknown_posting_type():
    response = client.post("/validate", json={"text": "x", "posting_type": "contract"})
    assert response.status_code == 422


def test_validate_requires_text():
    response = client.post("/validate", json={})
    assert response.status_code == 422


def test_validate_rejects_oversized_text():
    response = client.post("/validate", json={"text": "a" * (settings.max_document_chars + 1)})
    assert response.status_code == 422


def test_validate_uses_slop_dependency():
    app.dependency_overrides[get_slop_detector] = lambda: (
        lambda text: SlopPenalty(penalty=15, issues=["Generic wording"], pattern_count=3)
    )
    try:
        response = client.post("/validate", json={"text": "Plain text."})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    data = response.json()
    assert data["slop_detection"]["penalty"] == 15
    assert data["slop_detection"]["deduction"] == 5


def test_extract():
    response = client.post(
        "/extract",
        json={"markdown": "# Senior Technical Product Manager\n\n## Requirements\n- Python and AWS"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["job_title"] == "Senior Technical Product Manager"
    assert data["role_level"] == "Senior"
    assert data["required_qualifications"] == "- Python and AWS"
    assert data["tech_stack"] == "AWS, Python"
    assert data["company_name"] == ""


def test_extract_blank():
    response = client.post("/extract", json={"markdown": "   "})
    assert response.status_code == 200
    assert all(v == "" for v in response.json().values())
