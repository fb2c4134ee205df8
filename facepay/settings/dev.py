from .base import *

DEBUG = True

ALLOWED_HOSTS = ["127.0.0.1", "localhost"]

# DRF renderers plus larges en dev (browsable API si tu veux)
REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = (
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
)

# Logs lisibles en dev
LOGGING["handlers"]["console"]["formatter"] = "simple"
