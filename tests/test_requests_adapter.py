"""
Tests for the requests-based adapter against a mocked server.
"""

import base64
from unittest.mock import create_autospec

import pytest
import requests
from requests_mock import Mocker

from conftest import NODE_URL, Recorder
from theo_sdk.auth import Credential
from theo_sdk.client import TheoRequest
from theo_sdk.exceptions import TimeoutError as TheoTimeoutError
from theo_sdk.exceptions import TransportError, UnacceptableStatusError
from theo_sdk.http.requests_adapter import RequestsAdapter
from theo_sdk.models import OutgoingRequest, Verb
from theo_sdk.session import Session

WAIT = 5


@pytest.fixture
def adapter():
    return RequestsAdapter()


def test_send_returns_metadata_and_body(adapter):
    with Mocker() as m:
        m.get(NODE_URL, status_code=200, content=b'{"data":{}}', headers={"X-Neo": "1"}, reason="OK")
        metadata, body = adapter.send(OutgoingRequest(url=NODE_URL), {"Accept": "application/json"})

    assert metadata.status_code == 200
    assert metadata.reason == "OK"
    assert metadata.headers["X-Neo"] == "1"
    assert metadata.url == NODE_URL
    assert body == b'{"data":{}}'
    assert m.last_request.headers["Accept"] == "application/json"


def test_empty_body_is_none(adapter):
    with Mocker() as m:
        m.delete(NODE_URL, status_code=204)
        metadata, body = adapter.send(OutgoingRequest(url=NODE_URL, verb=Verb.DELETE), {})

    assert metadata.status_code == 204
    assert body is None


def test_basic_auth_header(adapter):
    credential = Credential(username="neo4j", password="secret")
    expected = "Basic " + base64.b64encode(b"neo4j:secret").decode("ascii")

    with Mocker() as m:
        m.get(NODE_URL, status_code=200)
        adapter.send(OutgoingRequest(url=NODE_URL), {}, auth=credential)

    assert m.last_request.headers["Authorization"] == expected


def test_json_body_sent_verbatim(adapter):
    request = OutgoingRequest(url=NODE_URL, verb=Verb.PUT, body=b'{"name":"a"}')

    with Mocker() as m:
        m.put(NODE_URL, status_code=204)
        adapter.send(request, {"Content-Type": "application/json"})

    assert m.last_request.method == "PUT"
    assert m.last_request.body == b'{"name":"a"}'
    assert m.last_request.headers["Content-Type"] == "application/json"


def test_connection_error_wrapped(adapter):
    with Mocker() as m:
        m.get(NODE_URL, exc=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(TransportError) as exc_info:
            adapter.send(OutgoingRequest(url=NODE_URL), {})

    assert not isinstance(exc_info.value, TheoTimeoutError)
    assert exc_info.value.user_info["url"] == NODE_URL
    assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)


def test_timeout_wrapped(adapter):
    with Mocker() as m:
        m.get(NODE_URL, exc=requests.exceptions.ConnectTimeout)
        with pytest.raises(TheoTimeoutError):
            adapter.send(OutgoingRequest(url=NODE_URL), {})


def test_external_session_left_open():
    external = create_autospec(requests.Session, instance=True)
    RequestsAdapter(session=external).close()
    external.close.assert_not_called()


def test_owned_session_closed():
    adapter = RequestsAdapter()
    adapter.session = create_autospec(requests.Session, instance=True)
    adapter.close()
    adapter.session.close.assert_called_once()


class TestThroughExecutor:
    """Full pipeline with the real adapter and a mocked server."""

    def test_404_end_to_end(self):
        recorder = Recorder()
        with Mocker() as m, Session() as session:
            m.get(NODE_URL, status_code=404, content=b'{"message":"Cannot find node"}')
            request = TheoRequest(
                NODE_URL,
                credential=Credential(username="neo4j", password="secret"),
                additional_headers={"X-Stream": "true"},
                session=session,
            )
            result = request.get_resource(recorder.on_success, recorder.on_error).result(WAIT)

            assert m.last_request.headers["X-Stream"] == "true"
            assert m.last_request.headers["Authorization"].startswith("Basic ")

        assert recorder.successes[0][0] is None
        assert len(recorder.errors) == 1
        assert isinstance(recorder.errors[0][0], UnacceptableStatusError)
        assert result.status_code == 404

    def test_post_end_to_end(self):
        with Mocker() as m, Session() as session:
            m.post(NODE_URL, status_code=201, content=b'{"id":2}')
            result = TheoRequest(NODE_URL, session=session).post_resource({"name": "a"}).result(WAIT)

            assert m.last_request.body == b'{"name":"a"}'
            assert m.last_request.headers["Content-Type"] == "application/json"

        assert result.ok
        assert result.data == b'{"id":2}'
