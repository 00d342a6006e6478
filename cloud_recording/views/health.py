from django.http import JsonResponse, HttpResponseNotAllowed
from django.views.decorators.csrf import csrf_exempt

from ..conf import RecordingSettings
from ..errors import ConfigurationError
from ..http import error_response


@csrf_exempt
def health(request):
    if request.method != "GET":
        return HttpResponseNotAllowed(["GET"])

    try:
        settings = RecordingSettings.from_env()
    except ConfigurationError as exc:
        return error_response(exc)

    missing = settings.missing()
    return JsonResponse({
        "status": "ok",
        "recording_mode": settings.recording_mode,
        "recording": "configured" if not missing else "not_configured",
        "missing": missing,
    })
