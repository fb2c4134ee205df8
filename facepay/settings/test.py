from .base import *

DEBUG = False

ALLOWED_HOSTS = ["testserver", "127.0.0.1", "localhost"]

# Tests déterministes: stub liveness + intents simulés, quel que soit l'env local
FACE_AUTH = {
    "REGION": "",
    "ACCESS_KEY_ID": "",
    "SECRET_ACCESS_KEY": "",
    "SESSION_TOKEN": "",
    "MIN_CONFIDENCE": "80",
    "TIMEOUT_S": 2.0,
}

OPENPAYMENTS = {
    "BASE_URL": "https://api.openpayments.guide",
    "API_KEY": "",
    "TIMEOUT_S": 2.0,
}

STORAGES["staticfiles"] = {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"}

LOGGING["handlers"]["console"]["formatter"] = "simple"
