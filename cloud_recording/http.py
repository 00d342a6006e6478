import json
import logging
from typing import Tuple

from django.http import JsonResponse

from .errors import (
    CloudRecordingError,
    ResponseDecodeError,
    TransportError,
    TransportTimeout,
)

logger = logging.getLogger("cloud_recording")


def json_body(request) -> Tuple[dict, JsonResponse]:
    try:
        body = request.body.decode("utf-8") if request.body else "{}"
        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError("JSON body must be an object")
        return data, None
    except (json.JSONDecodeError, ValueError) as exc:
        return None, JsonResponse({"error": f"invalid_json: {exc}"}, status=400)


def require_fields(data: dict, *keys):
    missing = [key for key in keys if data.get(key) in (None, "")]
    if missing:
        return JsonResponse({"error": "missing_fields", "required": missing}, status=400)
    return None


def require_settings(settings):
    missing = settings.missing()
    if missing:
        return JsonResponse({"error": "missing_env", "missing": missing}, status=500)
    return None


def error_response(exc: CloudRecordingError) -> JsonResponse:
    if isinstance(exc, TransportTimeout):
        status = 504
    elif isinstance(exc, TransportError):
        status = 503
    elif isinstance(exc, ResponseDecodeError):
        status = 502
    else:
        status = 500
    logger.error(f"[RECORDING] {exc.code}: {exc}")
    return JsonResponse({"error": exc.code, "message": str(exc)}, status=status)
