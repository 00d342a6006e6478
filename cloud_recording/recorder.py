"""
Cloud recording client.

Each call follows the same path: build the payload, JSON-encode it, POST it
with the customer's basic-auth credentials, decode the JSON object that comes
back and log it. The remote service owns the acquire -> start -> update ->
stop lifecycle; nothing here checks that calls arrive in that order.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import (
    CHANNEL_TYPE,
    DECRYPTION_MODE,
    FILE_PREFIX_DATE_FORMAT,
    FILE_PREFIX_TIME_FORMAT,
    INDIVIDUAL_FILE_TYPES,
    INDIVIDUAL_SUBSCRIBE_GROUP,
    MAX_IDLE_TIME,
    MIX_MODE,
    MIXED_BACKGROUND_COLOR,
    MIXED_BITRATE,
    MIXED_FILE_TYPES,
    MIXED_FPS,
    MIXED_HEIGHT,
    MIXED_LAYOUT,
    MIXED_WIDTH,
    RESOURCE_EXPIRED_HOUR,
    STREAM_TYPES,
)
from .credentials import generate_user_credentials
from .errors import RequestBuildError
from .payloads import (
    AcquireClientRequest,
    AcquireRequest,
    RecordingConfig,
    RecordingFileConfig,
    StartClientRequest,
    StartRecordRequest,
    StorageConfig,
    TranscodingConfig,
    UpdateLayoutRequest,
)
from .results import (
    AcquireResult,
    QueryResult,
    StartResult,
    StopResult,
    UpdateLayoutResult,
    decode_body,
)
from .transport import RequestsTransport
from .utils import redact

logger = logging.getLogger("cloud_recording")

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Recorder:
    """Caller-held handle for one recording session; not safe to share across threads."""

    channel: str
    uid: int = 0
    token: str = ""
    rid: str = ""
    sid: str = ""


def _utcnow():
    return datetime.now(timezone.utc)


class CloudRecordingClient:
    def __init__(
        self,
        settings,
        transport=None,
        credential_generator=None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = settings
        self.transport = transport or RequestsTransport()
        self.credential_generator = credential_generator or generate_user_credentials
        self.clock = clock or _utcnow

    def _url(self, *parts) -> str:
        path = "/".join(str(part) for part in parts)
        return f"{self.settings.base_url}/{self.settings.app_id}/cloud_recording/{path}"

    def _send(self, method: str, url: str, payload: Optional[Dict[str, Any]], tag: str):
        body = None
        if payload is not None:
            try:
                body = json.dumps(payload).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise RequestBuildError(f"could not encode {tag} request: {exc}") from exc

        response = self.transport.send(
            method,
            url,
            body=body,
            headers=JSON_HEADERS,
            auth=self.settings.basic_auth,
            timeout=self.settings.request_timeout,
        )
        if not 200 <= response.status_code < 300:
            logger.warning(f"[{tag}] {method} {url} returned HTTP {response.status_code}")

        result = decode_body(response.content, response.status_code)
        logger.debug(f"[{tag}] Response: {result}")
        return result, response.status_code

    def file_name_prefix(self, channel_title: str) -> List[str]:
        try:
            zone = ZoneInfo(self.settings.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise RequestBuildError(f"unknown time zone {self.settings.timezone!r}") from exc
        now = self.clock().astimezone(zone)
        return [
            channel_title,
            now.strftime(FILE_PREFIX_DATE_FORMAT),
            now.strftime(FILE_PREFIX_TIME_FORMAT),
        ]

    def acquire(self, recorder: Recorder) -> AcquireResult:
        creds = self.credential_generator(self.settings, recorder.channel, False, False)
        recorder.uid = creds.uid
        recorder.token = creds.rtc

        request = AcquireRequest(
            cname=recorder.channel,
            uid=str(recorder.uid),
            client_request=AcquireClientRequest(resource_expired_hour=RESOURCE_EXPIRED_HOUR),
        )
        logger.info(f"[RECORDING/ACQUIRE] channel={recorder.channel}, uid={recorder.uid}")

        data, status = self._send("POST", self._url("acquire"), request.to_dict(), "RECORDING/ACQUIRE")
        result = AcquireResult.from_response(data, status)
        recorder.rid = result.resource_id
        return result

    def build_start_request(
        self, recorder: Recorder, channel_title: str, secret: Optional[str] = None
    ) -> StartRecordRequest:
        if self.settings.is_individual:
            transcoding_config = None
            subscribe_group = INDIVIDUAL_SUBSCRIBE_GROUP
            av_file_type = list(INDIVIDUAL_FILE_TYPES)
        else:
            transcoding_config = TranscodingConfig(
                height=MIXED_HEIGHT,
                width=MIXED_WIDTH,
                bitrate=MIXED_BITRATE,
                fps=MIXED_FPS,
                mixed_video_layout=MIXED_LAYOUT,
                background_color=MIXED_BACKGROUND_COLOR,
            )
            subscribe_group = None
            av_file_type = list(MIXED_FILE_TYPES)

        recording_config = RecordingConfig(
            max_idle_time=MAX_IDLE_TIME,
            stream_types=STREAM_TYPES,
            channel_type=CHANNEL_TYPE,
            transcoding_config=transcoding_config,
            subscribe_uid_group=subscribe_group,
        )
        if secret:
            recording_config.decryption_mode = DECRYPTION_MODE
            recording_config.secret = secret

        return StartRecordRequest(
            cname=recorder.channel,
            uid=str(recorder.uid),
            client_request=StartClientRequest(
                token=recorder.token,
                recording_config=recording_config,
                recording_file_config=RecordingFileConfig(av_file_type=av_file_type),
                storage_config=StorageConfig(
                    vendor=self.settings.vendor,
                    region=self.settings.region,
                    bucket=self.settings.bucket,
                    access_key=self.settings.access_key,
                    secret_key=self.settings.secret_key,
                    file_name_prefix=self.file_name_prefix(channel_title),
                ),
            ),
        )

    def start(
        self, recorder: Recorder, channel_title: str, secret: Optional[str] = None
    ) -> StartResult:
        request = self.build_start_request(recorder, channel_title, secret)
        payload = request.to_dict()
        logger.info(f"[RECORDING/START] Request: {redact(payload)}")

        url = self._url("resourceid", recorder.rid, "mode", self.settings.recording_mode, "start")
        data, status = self._send("POST", url, payload, "RECORDING/START")
        result = StartResult.from_response(data, status)
        recorder.sid = result.sid
        return result

    def change_recording_mode(
        self,
        channel: str,
        uid: int,
        rid: str,
        sid: str,
        mode: int,
        max_resolution_uid: str = "",
    ) -> Optional[UpdateLayoutResult]:
        # Individual recordings have no mixed layout to change.
        if self.settings.is_individual:
            logger.debug(f"[RECORDING/LAYOUT] Skipped for channel={channel}, mode is individual")
            return None

        request = UpdateLayoutRequest(
            cname=channel,
            uid=str(uid),
            client_request=TranscodingConfig(
                mixed_video_layout=mode,
                max_resolution_uid=max_resolution_uid,
            ),
        )
        payload = request.to_dict()
        logger.info(f"[RECORDING/LAYOUT] Request: {payload}")

        url = self._url("resourceid", rid, "sid", sid, "mode", MIX_MODE, "updateLayout")
        data, status = self._send("POST", url, payload, "RECORDING/LAYOUT")
        return UpdateLayoutResult.from_response(data, status)

    def stop(self, channel: str, uid: int, rid: str, sid: str) -> StopResult:
        payload = AcquireRequest(cname=channel, uid=str(uid)).to_dict()
        logger.info(f"[RECORDING/STOP] Request: {payload}")

        url = self._url("resourceid", rid, "sid", sid, "mode", self.settings.recording_mode, "stop")
        data, status = self._send("POST", url, payload, "RECORDING/STOP")
        return StopResult.from_response(data, status)

    def query(self, rid: str, sid: str) -> QueryResult:
        url = self._url("resourceid", rid, "sid", sid, "mode", self.settings.recording_mode, "query")
        data, status = self._send("GET", url, None, "RECORDING/QUERY")
        return QueryResult.from_response(data, status)

    def close(self):
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()
