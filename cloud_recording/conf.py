"""
Recording configuration, read from the environment into an explicit value
object that is handed to the client instead of being looked up at call time.
"""
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .constants import (
    AGORA_API_BASE_URL,
    DEFAULT_FILE_PREFIX_TIMEZONE,
    DEFAULT_RECORDING_MODE,
    INDIVIDUAL_MODE,
)
from .errors import ConfigurationError

REQUIRED_ENV = ("AGORA_APP_ID", "AGORA_CUSTOMER_ID", "AGORA_CUSTOMER_CERTIFICATE")


def _int_env(environ: Mapping[str, str], key: str, default: int = 0) -> int:
    value = environ.get(key)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")


def _timeout_env(environ: Mapping[str, str], key: str) -> Optional[float]:
    value = environ.get(key)
    if value in (None, ""):
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number of seconds, got {value!r}")
    if timeout <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value!r}")
    return timeout


@dataclass(frozen=True)
class RecordingSettings:
    app_id: str
    app_certificate: str = ""
    customer_id: str = ""
    customer_certificate: str = ""
    recording_mode: str = DEFAULT_RECORDING_MODE
    vendor: int = 0
    region: int = 0
    bucket: str = ""
    access_key: str = ""
    secret_key: str = ""
    timezone: str = DEFAULT_FILE_PREFIX_TIMEZONE
    base_url: str = AGORA_API_BASE_URL
    request_timeout: Optional[float] = None

    @property
    def is_individual(self) -> bool:
        return self.recording_mode == INDIVIDUAL_MODE

    @property
    def basic_auth(self):
        return (self.customer_id, self.customer_certificate)

    def missing(self) -> List[str]:
        values = {
            "AGORA_APP_ID": self.app_id,
            "AGORA_CUSTOMER_ID": self.customer_id,
            "AGORA_CUSTOMER_CERTIFICATE": self.customer_certificate,
        }
        return [key for key in REQUIRED_ENV if not values[key]]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RecordingSettings":
        env = os.environ if environ is None else environ
        return cls(
            app_id=env.get("AGORA_APP_ID", ""),
            app_certificate=env.get("AGORA_APP_CERT", ""),
            customer_id=env.get("AGORA_CUSTOMER_ID", ""),
            customer_certificate=env.get("AGORA_CUSTOMER_CERTIFICATE", ""),
            recording_mode=env.get("RECORDING_MODE") or DEFAULT_RECORDING_MODE,
            vendor=_int_env(env, "RECORDING_VENDOR"),
            region=_int_env(env, "RECORDING_REGION"),
            bucket=env.get("BUCKET_NAME", ""),
            access_key=env.get("BUCKET_ACCESS_KEY", ""),
            secret_key=env.get("BUCKET_ACCESS_SECRET", ""),
            timezone=env.get("RECORDING_TIMEZONE") or DEFAULT_FILE_PREFIX_TIMEZONE,
            base_url=(env.get("AGORA_API_BASE_URL") or AGORA_API_BASE_URL).rstrip("/"),
            request_timeout=_timeout_env(env, "RECORDING_REQUEST_TIMEOUT"),
        )
