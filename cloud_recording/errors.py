class CloudRecordingError(Exception):
    """Base error for everything the recording client raises."""

    code = "cloud_recording_error"


class ConfigurationError(CloudRecordingError):
    code = "invalid_configuration"


class CredentialError(CloudRecordingError):
    code = "credential_generation_failed"


class RequestBuildError(CloudRecordingError):
    code = "request_build_failed"


class TransportError(CloudRecordingError):
    code = "recording_service_unavailable"


class TransportTimeout(TransportError):
    code = "recording_service_timeout"


class ResponseDecodeError(CloudRecordingError):
    """The response body is not a JSON object or lacks a required field."""

    code = "invalid_recording_response"

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
