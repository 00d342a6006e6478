from __future__ import annotations

import base64
import json

import pytest
import requests
import responses

from cloud_recording.errors import ResponseDecodeError, TransportError, TransportTimeout
from cloud_recording.recorder import CloudRecordingClient, Recorder
from cloud_recording.transport import RequestsTransport

from conftest import BASE, FakeCredentials, make_settings


@responses.activate
def test_requests_transport_sends_json_with_basic_auth() -> None:
    responses.add(responses.POST, f"{BASE}/acquire", json={"resourceId": "R1"}, status=200)
    client = CloudRecordingClient(make_settings(), transport=RequestsTransport(), credential_generator=FakeCredentials())

    client.acquire(Recorder(channel="room"))

    assert len(responses.calls) == 1
    request = responses.calls[0].request
    expected = base64.b64encode(b"customer:customer-secret").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.body)["clientRequest"] == {"resourceExpiredHour": 24}


@responses.activate
def test_timeout_becomes_transport_timeout() -> None:
    responses.add(responses.POST, f"{BASE}/acquire", body=requests.exceptions.ReadTimeout("slow"))
    client = CloudRecordingClient(make_settings(), transport=RequestsTransport(), credential_generator=FakeCredentials())

    with pytest.raises(TransportTimeout):
        client.acquire(Recorder(channel="room"))


@responses.activate
def test_connection_error_becomes_transport_error() -> None:
    responses.add(responses.POST, f"{BASE}/acquire", body=requests.exceptions.ConnectionError("refused"))
    client = CloudRecordingClient(make_settings(), transport=RequestsTransport(), credential_generator=FakeCredentials())

    with pytest.raises(TransportError) as exc_info:
        client.acquire(Recorder(channel="room"))
    assert not isinstance(exc_info.value, TransportTimeout)


@responses.activate
def test_html_error_page_is_a_decode_error() -> None:
    responses.add(responses.POST, f"{BASE}/acquire", body="<html>502</html>", status=502)
    client = CloudRecordingClient(make_settings(), transport=RequestsTransport(), credential_generator=FakeCredentials())

    with pytest.raises(ResponseDecodeError) as exc_info:
        client.acquire(Recorder(channel="room"))
    assert exc_info.value.status_code == 502


def test_transport_closes_session() -> None:
    session = requests.Session()
    closed = []
    session.close = lambda: closed.append(True)

    with RequestsTransport(session) as transport:
        assert transport.session is session
    assert closed == [True]
