"""Unit tests for iTwin job endpoints."""
import pytest

from access_control.core.exceptions import InvalidRequestError
from access_control.core.jobs import ITwinJobsClient
from tests.conftest import TEST_BASE_URL, TEST_ITWIN_ID, TEST_TOKEN, StubResponse

JOBS_URL = f"{TEST_BASE_URL}/{TEST_ITWIN_ID}/jobs"

ACTIONS = {"assignRoles": [{"email": "alice@example.com", "roleIds": ["role-1"]}]}


def test_create_itwin_job(client, session):
    session.queue(StubResponse(201, {"job": {"id": "job-1", "itwinId": TEST_ITWIN_ID, "status": "Active"}}))
    response = client.itwin_jobs.create_itwin_job(TEST_TOKEN, TEST_ITWIN_ID, ACTIONS)
    assert session.last_call["method"] == "POST"
    assert session.last_call["url"] == JOBS_URL
    assert session.last_call["json"] == {"actions": ACTIONS}
    assert response.status == 201
    assert response.data["itwinId"] == TEST_ITWIN_ID


def test_get_itwin_job_defaults_to_minimal(client, session):
    session.queue(StubResponse(200, {"job": {"id": "job-1", "itwinId": TEST_ITWIN_ID, "status": "Completed"}}))
    response = client.itwin_jobs.get_itwin_job(TEST_TOKEN, TEST_ITWIN_ID, "job-1")
    assert session.last_call["url"] == f"{JOBS_URL}/job-1"
    assert session.last_call["headers"]["prefer"] == "return=minimal"
    assert "error" not in response.data


def test_get_itwin_job_representation_includes_errors(client, session):
    job = {"id": "job-1", "itwinId": TEST_ITWIN_ID, "status": "PartialCompleted", "error": []}
    session.queue(StubResponse(200, {"job": job}))
    response = client.itwin_jobs.get_itwin_job(TEST_TOKEN, TEST_ITWIN_ID, "job-1", "representation")
    assert session.last_call["headers"]["prefer"] == "return=representation"
    assert response.data["error"] == []
    assert response.data["status"] == "PartialCompleted"


def test_get_itwin_job_rejects_unknown_result_mode(client, session):
    with pytest.raises(InvalidRequestError):
        client.itwin_jobs.get_itwin_job(TEST_TOKEN, TEST_ITWIN_ID, "job-1", "full")
    assert session.calls == []


def test_get_missing_job_returns_404(client, session):
    session.queue(StubResponse(404, {"error": {"code": "iTwinJobNotFound", "message": "Requested job is not available."}}))
    response = client.itwin_jobs.get_itwin_job(TEST_TOKEN, TEST_ITWIN_ID, "nope")
    assert response.status == 404
    assert response.data is None


def test_get_itwin_job_actions(client, session):
    session.queue(StubResponse(200, {"actions": ACTIONS}))
    response = client.itwin_jobs.get_itwin_job_actions(TEST_TOKEN, TEST_ITWIN_ID, "job-1")
    assert session.last_call["url"] == f"{JOBS_URL}/job-1/actions"
    assert response.data["assignRoles"][0]["roleIds"] == ["role-1"]


def test_result_mode_headers():
    assert ITwinJobsClient.result_mode_headers() == {"prefer": "return=minimal"}
    assert ITwinJobsClient.result_mode_headers("representation") == {"prefer": "return=representation"}
