"""
Request bodies for the cloud recording REST API.

Each shape mirrors the vendor JSON schema. Optional fields are left out of
``to_dict()`` entirely when they hold their default value; the API reads a
missing key differently from an explicit null or zero.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AcquireClientRequest:
    resource_expired_hour: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        if self.resource_expired_hour:
            data["resourceExpiredHour"] = self.resource_expired_hour
        return data


@dataclass
class AcquireRequest:
    """Acquire body; with an empty client request it is also the stop body."""

    cname: str
    uid: str
    client_request: AcquireClientRequest = field(default_factory=AcquireClientRequest)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cname": self.cname,
            "uid": self.uid,
            "clientRequest": self.client_request.to_dict(),
        }


@dataclass
class TranscodingConfig:
    mixed_video_layout: int = 0
    height: int = 0
    width: int = 0
    bitrate: int = 0
    fps: int = 0
    max_resolution_uid: str = ""
    background_color: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.height:
            data["height"] = self.height
        if self.width:
            data["width"] = self.width
        if self.bitrate:
            data["bitrate"] = self.bitrate
        if self.fps:
            data["fps"] = self.fps
        data["mixedVideoLayout"] = self.mixed_video_layout
        if self.max_resolution_uid:
            data["maxResolutionUid"] = self.max_resolution_uid
        if self.background_color:
            data["backgroundColor"] = self.background_color
        return data


@dataclass
class RecordingConfig:
    max_idle_time: int
    stream_types: int
    channel_type: int
    decryption_mode: int = 0
    secret: str = ""
    transcoding_config: Optional[TranscodingConfig] = None
    subscribe_uid_group: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "maxIdleTime": self.max_idle_time,
            "streamTypes": self.stream_types,
            "channelType": self.channel_type,
        }
        if self.decryption_mode:
            data["decryptionMode"] = self.decryption_mode
        if self.secret:
            data["secret"] = self.secret
        if self.transcoding_config is not None:
            data["transcodingConfig"] = self.transcoding_config.to_dict()
        if self.subscribe_uid_group is not None:
            data["subscribeUidGroup"] = self.subscribe_uid_group
        return data


@dataclass
class StorageConfig:
    vendor: int
    region: int
    bucket: str
    access_key: str
    secret_key: str
    file_name_prefix: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vendor": self.vendor,
            "region": self.region,
            "bucket": self.bucket,
            "accessKey": self.access_key,
            "secretKey": self.secret_key,
            "fileNamePrefix": list(self.file_name_prefix),
        }


@dataclass
class RecordingFileConfig:
    av_file_type: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"avFileType": list(self.av_file_type)}


@dataclass
class StartClientRequest:
    token: str
    recording_config: RecordingConfig
    recording_file_config: RecordingFileConfig
    storage_config: StorageConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "recordingConfig": self.recording_config.to_dict(),
            "recordingFileConfig": self.recording_file_config.to_dict(),
            "storageConfig": self.storage_config.to_dict(),
        }


@dataclass
class StartRecordRequest:
    cname: str
    uid: str
    client_request: StartClientRequest

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cname": self.cname,
            "uid": self.uid,
            "clientRequest": self.client_request.to_dict(),
        }


@dataclass
class UpdateLayoutRequest:
    cname: str
    uid: str
    client_request: TranscodingConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cname": self.cname,
            "uid": self.uid,
            "clientRequest": self.client_request.to_dict(),
        }
