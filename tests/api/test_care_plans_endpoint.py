import pytest
from datetime import datetime, timezone
from uuid import uuid4
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from backend.api.deps import get_attribution_service
from backend.api.routers.care_plans import router as care_plans_router
from backend.core.exceptions import CarePlanNotFoundError, ConfigurationError, GenerationError
from backend.models.attribution import AttributionSection, SourceAttribution

@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(care_plans_router)
    return app

@pytest.fixture
def client(app):
    return TestClient(app)

@pytest.fixture
def mock_attribution_service():
    return AsyncMock()

@pytest.fixture
def attribution():
    return SourceAttribution(
        sections=[AttributionSection(section_name="Patient Education", statements=[])],
        generated_at=datetime(2026, 2, 1, 9, 30, tzinfo=timezone.utc),
        model_used="openai/gpt-oss-20b:free",
    )

def test_generate_care_plan_attribution(client, mock_attribution_service, attribution):
    care_plan_id = uuid4()
    mock_attribution_service.generate_for_care_plan.return_value = attribution
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.post(f"/care-plans/{care_plan_id}/attribution")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Source attribution generated successfully"
    assert data["care_plan_id"] == str(care_plan_id)
    assert data["attribution_data"]["sections"][0]["section"] == "Patient Education"
    mock_attribution_service.generate_for_care_plan.assert_awaited_once_with(care_plan_id)

def test_generate_care_plan_attribution_not_found(client, mock_attribution_service):
    care_plan_id = uuid4()
    mock_attribution_service.generate_for_care_plan.side_effect = CarePlanNotFoundError(str(care_plan_id))
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.post(f"/care-plans/{care_plan_id}/attribution")

    assert response.status_code == 404
    assert response.json()["detail"] == f"Care plan not found: {care_plan_id}"

@pytest.mark.parametrize(
    "error",
    [
        ConfigurationError("OPENROUTER_API_KEY environment variable is not set"),
        GenerationError("Failed to generate source attribution: timed out"),
    ],
)
def test_generate_care_plan_attribution_failure(client, mock_attribution_service, error):
    mock_attribution_service.generate_for_care_plan.side_effect = error
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.post(f"/care-plans/{uuid4()}/attribution")

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Failed to generate source attribution:")

def test_generate_care_plan_attribution_invalid_id(client, mock_attribution_service):
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.post("/care-plans/not-a-uuid/attribution")

    assert response.status_code == 422

def test_get_care_plan_attribution(client, mock_attribution_service, attribution):
    mock_attribution_service.get_attribution.return_value = attribution
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.get(f"/care-plans/{uuid4()}/attribution")

    assert response.status_code == 200
    assert response.json()["model_used"] == "openai/gpt-oss-20b:free"

def test_get_care_plan_attribution_not_generated(client, mock_attribution_service):
    care_plan_id = uuid4()
    mock_attribution_service.get_attribution.return_value = None
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.get(f"/care-plans/{care_plan_id}/attribution")

    assert response.status_code == 404
    assert response.json()["detail"] == f"No attribution stored for care plan {care_plan_id}"

def test_get_care_plan_attribution_not_found(client, mock_attribution_service):
    care_plan_id = uuid4()
    mock_attribution_service.get_attribution.side_effect = CarePlanNotFoundError(str(care_plan_id))
    client.app.dependency_overrides[get_attribution_service] = lambda: mock_attribution_service

    response = client.get(f"/care-plans/{care_plan_id}/attribution")

    assert response.status_code == 404
