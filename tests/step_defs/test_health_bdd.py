"""
BDD step definitions for health feature (pytest-bdd).
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import parsers, scenarios, then, when

from bloglist.main import app

scenarios("../features/health.feature")


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}


@when(parsers.parse('I request "GET" "{path}"'))
def request_path(response, path):
    r = TestClient(app).get(path)
    response["status"] = r.status_code
    response["body"] = r.json()


@then(parsers.parse("the response status should be {status:d}"))
def status_is(response, status):
    assert response["status"] == status


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_has(response, key, value):
    assert response["body"].get(key) == value
