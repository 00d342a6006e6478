from __future__ import annotations

from cloud_recording.constants import DEFAULT_TOKEN_EXPIRE_SECONDS, ROLE_PUBLISHER, ROLE_SUBSCRIBER
from cloud_recording.utils import clamp_expire, first_n, parse_role, redact


def test_first_n_truncates() -> None:
    assert first_n("hello", 3) == "hel"


def test_first_n_shorter_string_is_returned_whole() -> None:
    assert first_n("hi", 10) == "hi"
    assert first_n("", 4) == ""


def test_first_n_counts_code_points() -> None:
    assert first_n("héllo", 2) == "hé"
    assert first_n("日本語テキスト", 3) == "日本語"
    assert first_n("a🎥b", 2) == "a🎥"


def test_first_n_zero_is_empty() -> None:
    assert first_n("hello", 0) == ""


def test_first_n_negative_keeps_whole_string() -> None:
    assert first_n("hello", -1) == "hello"
    assert first_n("日本語", -3) == "日本語"


def test_parse_role() -> None:
    assert parse_role(None) == ROLE_SUBSCRIBER
    assert parse_role("Host") == ROLE_PUBLISHER
    assert parse_role("audience") == ROLE_SUBSCRIBER
    assert parse_role(1) == ROLE_PUBLISHER
    assert parse_role(7) == ROLE_SUBSCRIBER
    assert parse_role("admin") is None


def test_clamp_expire() -> None:
    assert clamp_expire("600") == 600
    assert clamp_expire(-5) == DEFAULT_TOKEN_EXPIRE_SECONDS
    assert clamp_expire("soon") == DEFAULT_TOKEN_EXPIRE_SECONDS
    assert clamp_expire(10**9) == DEFAULT_TOKEN_EXPIRE_SECONDS


def test_redact_masks_nested_credentials() -> None:
    payload = {
        "cname": "room",
        "clientRequest": {
            "token": "t",
            "recordingConfig": {"secret": "", "maxIdleTime": 30},
            "storageConfig": {"accessKey": "a", "secretKey": "s", "bucket": "b"},
        },
    }
    masked = redact(payload)
    assert masked["clientRequest"]["token"] == "***"
    assert masked["clientRequest"]["storageConfig"] == {"accessKey": "***", "secretKey": "***", "bucket": "b"}
    assert masked["clientRequest"]["recordingConfig"]["secret"] == ""
    assert payload["clientRequest"]["token"] == "t"
