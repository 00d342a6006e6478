from __future__ import annotations

import pytest

from cloud_recording.conf import RecordingSettings
from cloud_recording.constants import AGORA_API_BASE_URL, DEFAULT_FILE_PREFIX_TIMEZONE
from cloud_recording.errors import ConfigurationError


def test_from_env_reads_values() -> None:
    settings = RecordingSettings.from_env(
        {
            "AGORA_APP_ID": "app",
            "AGORA_APP_CERT": "cert",
            "AGORA_CUSTOMER_ID": "cid",
            "AGORA_CUSTOMER_CERTIFICATE": "csecret",
            "RECORDING_MODE": "individual",
            "RECORDING_VENDOR": "1",
            "RECORDING_REGION": "14",
            "BUCKET_NAME": "bucket",
            "BUCKET_ACCESS_KEY": "ak",
            "BUCKET_ACCESS_SECRET": "sk",
            "AGORA_API_BASE_URL": "http://localhost:9000/v1/apps/",
            "RECORDING_REQUEST_TIMEOUT": "12.5",
        }
    )
    assert settings.is_individual
    assert settings.vendor == 1
    assert settings.region == 14
    assert settings.basic_auth == ("cid", "csecret")
    assert settings.base_url == "http://localhost:9000/v1/apps"
    assert settings.request_timeout == 12.5
    assert settings.missing() == []


def test_from_env_defaults() -> None:
    settings = RecordingSettings.from_env({})
    assert settings.recording_mode == "mix"
    assert not settings.is_individual
    assert settings.timezone == DEFAULT_FILE_PREFIX_TIMEZONE
    assert settings.base_url == AGORA_API_BASE_URL
    assert settings.request_timeout is None
    assert settings.missing() == ["AGORA_APP_ID", "AGORA_CUSTOMER_ID", "AGORA_CUSTOMER_CERTIFICATE"]


@pytest.mark.parametrize(
    "env",
    [
        {"RECORDING_VENDOR": "s3"},
        {"RECORDING_REGION": "1.5"},
        {"RECORDING_REQUEST_TIMEOUT": "forever"},
        {"RECORDING_REQUEST_TIMEOUT": "0"},
    ],
)
def test_from_env_rejects_bad_numbers(env: dict) -> None:
    with pytest.raises(ConfigurationError):
        RecordingSettings.from_env(env)
