import logging
import time

from django.http import JsonResponse, HttpResponseNotAllowed
from django.views.decorators.csrf import csrf_exempt

from ..conf import RecordingSettings
from ..constants import DEFAULT_TOKEN_EXPIRE_SECONDS
from ..credentials import build_rtc_token
from ..errors import CloudRecordingError
from ..http import error_response, json_body
from ..utils import parse_role, clamp_expire

logger = logging.getLogger("cloud_recording")


@csrf_exempt
def token(request):
    logger.info(f"[TOKEN] {request.method} from {request.META.get('REMOTE_ADDR')}")

    if request.method != "POST":
        logger.warning(f"[TOKEN] Method not allowed: {request.method}")
        return HttpResponseNotAllowed(["POST"])

    data, error = json_body(request)
    if error:
        logger.error("[TOKEN] Invalid JSON body")
        return error

    channel = data.get("channel") or data.get("cname")
    if not channel:
        logger.error("[TOKEN] Missing channel")
        return JsonResponse({"error": "missing_channel"}, status=400)

    uid = data.get("uid")
    user_account = data.get("user_account") or data.get("account")
    if uid is None and not user_account:
        return JsonResponse({"error": "missing_uid_or_account"}, status=400)

    role = parse_role(data.get("role"))
    if role is None:
        return JsonResponse({"error": "invalid_role"}, status=400)

    if not user_account:
        try:
            uid = int(uid)
        except (TypeError, ValueError):
            return JsonResponse({"error": "uid_must_be_int"}, status=400)

    expire = clamp_expire(data.get("expire", DEFAULT_TOKEN_EXPIRE_SECONDS))
    expire_ts = int(time.time()) + expire

    try:
        settings = RecordingSettings.from_env()
        token_value = build_rtc_token(settings, channel, role, expire_ts, uid=uid, account=user_account)
    except CloudRecordingError as exc:
        return error_response(exc)

    logger.info(f"[TOKEN] Success: channel={channel}, uid={user_account or uid}")
    return JsonResponse({
        "token": token_value,
        "expire_at": expire_ts,
        "expire_in": expire,
    })
