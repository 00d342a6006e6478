from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from cloud_recording.conf import RecordingSettings
from cloud_recording.credentials import UserCredentials
from cloud_recording.transport import TransportResponse

APP_ID = "0123456789abcdef0123456789abcdef"
APP_CERT = "fedcba9876543210fedcba9876543210"
BASE = f"https://api.agora.io/v1/apps/{APP_ID}/cloud_recording"

# 2024-01-15 12:30:05 in America/Los_Angeles (PST, UTC-8)
FIXED_NOW = datetime(2024, 1, 15, 20, 30, 5, tzinfo=timezone.utc)


class FakeTransport:
    def __init__(self, *responses: dict | bytes, status_code: int = 200) -> None:
        self._responses = list(responses)
        self.status_code = status_code
        self.calls: list[dict] = []

    def send(self, method, url, body=None, headers=None, auth=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "json": json.loads(body) if body else None,
                "headers": headers,
                "auth": auth,
                "timeout": timeout,
            }
        )
        item = self._responses.pop(0) if self._responses else {}
        content = item if isinstance(item, bytes) else json.dumps(item).encode("utf-8")
        return TransportResponse(status_code=self.status_code, content=content)


class FakeCredentials:
    def __init__(self, uid: int = 4242, rtc: str = "rtc-token") -> None:
        self.uid = uid
        self.rtc = rtc
        self.calls: list[tuple] = []

    def __call__(self, settings, channel, is_host=False, with_rtm=False):
        self.calls.append((channel, is_host, with_rtm))
        return UserCredentials(uid=self.uid, rtc=self.rtc)


def make_settings(**overrides) -> RecordingSettings:
    values = dict(
        app_id=APP_ID,
        app_certificate=APP_CERT,
        customer_id="customer",
        customer_certificate="customer-secret",
        recording_mode="mix",
        vendor=1,
        region=3,
        bucket="recordings",
        access_key="AKIA",
        secret_key="s3-secret",
    )
    values.update(overrides)
    return RecordingSettings(**values)


@pytest.fixture
def recording_env(monkeypatch) -> None:
    monkeypatch.setenv("AGORA_APP_ID", APP_ID)
    monkeypatch.setenv("AGORA_APP_CERT", APP_CERT)
    monkeypatch.setenv("AGORA_CUSTOMER_ID", "customer")
    monkeypatch.setenv("AGORA_CUSTOMER_CERTIFICATE", "customer-secret")
    monkeypatch.setenv("RECORDING_MODE", "mix")
    monkeypatch.setenv("RECORDING_VENDOR", "1")
    monkeypatch.setenv("RECORDING_REGION", "3")
    monkeypatch.setenv("BUCKET_NAME", "recordings")
    monkeypatch.setenv("BUCKET_ACCESS_KEY", "AKIA")
    monkeypatch.setenv("BUCKET_ACCESS_SECRET", "s3-secret")
    monkeypatch.delenv("AGORA_API_BASE_URL", raising=False)
    monkeypatch.delenv("RECORDING_TIMEZONE", raising=False)
    monkeypatch.delenv("RECORDING_REQUEST_TIMEOUT", raising=False)
