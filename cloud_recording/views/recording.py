import logging

from django.http import JsonResponse, HttpResponseNotAllowed
from django.views.decorators.csrf import csrf_exempt

from ..conf import RecordingSettings
from ..constants import MAX_TITLE_LENGTH
from ..errors import CloudRecordingError
from ..http import error_response, json_body, require_fields, require_settings
from ..recorder import CloudRecordingClient, Recorder
from ..utils import first_n

logger = logging.getLogger("cloud_recording")


def get_client(settings):
    return CloudRecordingClient(settings)


def _load_settings():
    try:
        return RecordingSettings.from_env(), None
    except CloudRecordingError as exc:
        return None, error_response(exc)


def _parse_uid(value):
    try:
        return int(value), None
    except (TypeError, ValueError):
        return None, JsonResponse({"error": "uid_must_be_int"}, status=400)


@csrf_exempt
def recording_start(request):
    """Acquire a recording resource for the channel and start recording."""
    logger.info(f"[RECORDING/START] {request.method} from {request.META.get('REMOTE_ADDR')}")

    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    data, error = json_body(request)
    if error:
        return error

    channel = data.get("channel") or data.get("cname")
    if not channel:
        return JsonResponse({"error": "missing_channel"}, status=400)

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        return JsonResponse({"error": "title_must_be_string"}, status=400)
    secret = data.get("secret")
    if secret is not None and not isinstance(secret, str):
        return JsonResponse({"error": "secret_must_be_string"}, status=400)

    settings, error = _load_settings()
    if error:
        return error
    missing_env = require_settings(settings)
    if missing_env:
        return missing_env

    title = first_n(title or channel, MAX_TITLE_LENGTH)
    recorder = Recorder(channel=channel)
    client = get_client(settings)
    try:
        client.acquire(recorder)
        client.start(recorder, title, secret)
    except CloudRecordingError as exc:
        return error_response(exc)
    finally:
        client.close()

    logger.info(f"[RECORDING/START] Started: channel={channel}, rid={recorder.rid}, sid={recorder.sid}")
    return JsonResponse({
        "channel": recorder.channel,
        "uid": recorder.uid,
        "resource_id": recorder.rid,
        "sid": recorder.sid,
        "mode": settings.recording_mode,
    })


@csrf_exempt
def recording_layout(request):
    """Change the mixed layout of a running recording."""
    logger.info(f"[RECORDING/LAYOUT] {request.method} from {request.META.get('REMOTE_ADDR')}")

    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    data, error = json_body(request)
    if error:
        return error

    missing = require_fields(data, "channel", "uid", "resource_id", "sid", "mode")
    if missing:
        return missing

    uid, error = _parse_uid(data["uid"])
    if error:
        return error
    try:
        mode = int(data["mode"])
    except (TypeError, ValueError):
        return JsonResponse({"error": "mode_must_be_int"}, status=400)

    settings, error = _load_settings()
    if error:
        return error
    missing_env = require_settings(settings)
    if missing_env:
        return missing_env

    client = get_client(settings)
    try:
        result = client.change_recording_mode(
            data["channel"],
            uid,
            data["resource_id"],
            data["sid"],
            mode,
            str(data.get("max_resolution_uid") or ""),
        )
    except CloudRecordingError as exc:
        return error_response(exc)
    finally:
        client.close()

    if result is None:
        return JsonResponse({"skipped": True, "mode": settings.recording_mode})
    return JsonResponse({"skipped": False, "response": result.raw})


@csrf_exempt
def recording_stop(request):
    """Stop a running recording."""
    logger.info(f"[RECORDING/STOP] {request.method} from {request.META.get('REMOTE_ADDR')}")

    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    data, error = json_body(request)
    if error:
        return error

    logger.info(f"[RECORDING/STOP] Request data: {data}")

    missing = require_fields(data, "channel", "uid", "resource_id", "sid")
    if missing:
        return missing

    uid, error = _parse_uid(data["uid"])
    if error:
        return error

    settings, error = _load_settings()
    if error:
        return error
    missing_env = require_settings(settings)
    if missing_env:
        return missing_env

    client = get_client(settings)
    try:
        result = client.stop(data["channel"], uid, data["resource_id"], data["sid"])
    except CloudRecordingError as exc:
        return error_response(exc)
    finally:
        client.close()

    return JsonResponse({
        "resource_id": result.resource_id or data["resource_id"],
        "sid": result.sid or data["sid"],
        "server_response": result.server_response,
    })


@csrf_exempt
def recording_status(request):
    """Query the status of a running recording."""
    logger.info(f"[RECORDING/STATUS] {request.method} from {request.META.get('REMOTE_ADDR')}")

    if request.method != "GET":
        return HttpResponseNotAllowed(["GET"])

    missing = require_fields(request.GET, "resource_id", "sid")
    if missing:
        return missing

    settings, error = _load_settings()
    if error:
        return error
    missing_env = require_settings(settings)
    if missing_env:
        return missing_env

    client = get_client(settings)
    try:
        result = client.query(request.GET["resource_id"], request.GET["sid"])
    except CloudRecordingError as exc:
        return error_response(exc)
    finally:
        client.close()

    return JsonResponse({
        "resource_id": result.resource_id,
        "sid": result.sid,
        "server_response": result.server_response,
    })
