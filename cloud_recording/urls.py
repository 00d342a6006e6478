from django.urls import path
from . import views

urlpatterns = [
    # Health check
    path("health", views.health, name="health"),

    # Agora token
    path("token", views.token, name="token"),

    # Cloud recording lifecycle
    path("recording/start", views.recording_start, name="recording_start"),
    path("recording/layout", views.recording_layout, name="recording_layout"),
    path("recording/stop", views.recording_stop, name="recording_stop"),
    path("recording/status", views.recording_status, name="recording_status"),
]
