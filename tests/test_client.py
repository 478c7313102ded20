"""Tests for the requests based SmartWords client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from smartwords_client import SmartWordsClient


def _response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://testserver"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return SmartWordsClient(base_url="http://localhost:3001/", session=session)


def test_search_sets_quotes_the_name(client, session):
    session.request.return_value = _response(200, [{"_id": "1", "name": "Test Set"}])

    sets, error = client.search_sets("Test Set")

    assert error is None
    assert sets == [{"_id": "1", "name": "Test Set"}]
    assert session.request.call_args.kwargs["url"] == "http://localhost:3001/set/search/Test%20Set"
    assert session.request.call_args.kwargs["method"] == "GET"


def test_list_sets_uses_versioned_prefix(session):
    session.request.return_value = _response(200, [])
    client = SmartWordsClient(base_url="http://api", prefix="api/v1/set/", session=session)

    assert client.list_sets() == ([], None)
    assert session.request.call_args.kwargs["url"] == "http://api/api/v1/set/"


def test_create_set_sends_only_word_fields(client, session):
    session.request.return_value = _response(201, {"_id": "9", "name": "Verbs"})

    created, error = client.create_set(
        "Verbs", "Common verbs", [{"word": "ir", "meaning": "to go", "extra": "x"}]
    )

    assert error is None
    assert created == {"_id": "9", "name": "Verbs"}
    assert session.request.call_args.kwargs["json"] == {
        "name": "Verbs",
        "description": "Common verbs",
        "words": [{"word": "ir", "meaning": "to go"}],
    }


def test_validation_failure_is_reported_as_error(client, session):
    session.request.return_value = _response(400, {"detail": "A set must contain at least one word."})

    created, error = client.create_set("Verbs", "Common verbs", [])

    assert created is None
    assert error == {"status_code": 400, "message": "A set must contain at least one word."}


def test_delete_set(client, session):
    session.request.return_value = _response(204)

    assert client.delete_set("abc") == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"
    assert session.request.call_args.kwargs["url"] == "http://localhost:3001/set/abc"


def test_delete_missing_set(client, session):
    session.request.return_value = _response(404, {"detail": "Set not found"})

    deleted, error = client.delete_set("abc")

    assert deleted is False
    assert error["status_code"] == 404


def test_connection_error_is_reported(client, session):
    session.request.side_effect = requests.ConnectionError("refused")

    sets, error = client.list_sets()

    assert sets == []
    assert error == {"status_code": None, "message": "refused"}


def test_search_term_with_slash_is_one_path_segment(client, session):
    session.request.return_value = _response(200, [])

    client.search_sets("A/B")

    assert session.request.call_args.kwargs["url"] == "http://localhost:3001/set/search/A%2FB"
