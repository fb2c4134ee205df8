from django.urls import path

from faceauth.views.session import FaceAuthSessionView

urlpatterns = [
    path("session", FaceAuthSessionView.as_view(), name="face-auth-session"),
]
