from django.urls import include, path

urlpatterns = [
    path("api/", include("cloud_recording.urls")),
]
