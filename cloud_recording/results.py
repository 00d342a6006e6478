import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ResponseDecodeError


def decode_body(content: bytes, status_code: Optional[int] = None) -> Dict[str, Any]:
    """Parse a response body that must be a JSON object."""
    if not content:
        raise ResponseDecodeError("empty response body", status_code=status_code)
    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ResponseDecodeError(
            f"response body is not valid JSON: {exc}",
            status_code=status_code,
            body=content,
        ) from exc
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            "response body must be a JSON object",
            status_code=status_code,
            body=content,
        )
    return data


def _require_str(data: Dict[str, Any], key: str, status_code: Optional[int]) -> str:
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    message = f"response has no {key}"
    reason = data.get("reason") or data.get("message")
    if reason:
        message = f"{message} (code={data.get('code')}, reason={reason})"
    raise ResponseDecodeError(message, status_code=status_code, body=data)


def _optional_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass
class AcquireResult:
    resource_id: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data, status_code=None):
        return cls(resource_id=_require_str(data, "resourceId", status_code), raw=data)


@dataclass
class StartResult:
    resource_id: str
    sid: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data, status_code=None):
        return cls(
            resource_id=_optional_str(data, "resourceId"),
            sid=_require_str(data, "sid", status_code),
            raw=data,
        )


@dataclass
class UpdateLayoutResult:
    resource_id: str
    sid: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data, status_code=None):
        return cls(
            resource_id=_optional_str(data, "resourceId"),
            sid=_optional_str(data, "sid"),
            raw=data,
        )


@dataclass
class StopResult:
    resource_id: str
    sid: str
    server_response: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data, status_code=None):
        server_response = data.get("serverResponse")
        return cls(
            resource_id=_optional_str(data, "resourceId"),
            sid=_optional_str(data, "sid"),
            server_response=server_response if isinstance(server_response, dict) else {},
            raw=data,
        )


class QueryResult(StopResult):
    """Status of a running recording; same shape as the stop response."""
