"""
Base settings for FacePay: paiement conditionné par une vérification biométrique
- Django 4.x / DRF 3.x
- Liveness: Amazon Rekognition Face Liveness (boto3), stub en local
- Paiements: proxy OpenPayments (httpx), mode simulé si non configuré
- drf-spectacular (Swagger & ReDoc)
- Logging structuré
"""


from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent

# ------------------------------------------------------------------------------
# ENV
# ------------------------------------------------------------------------------
def env(key: str, default=None, cast=None):
    val = os.getenv(key, default)
    if cast and val is not None:
        try:
            return cast(val)
        except Exception:
            return default
    return val

SECRET_KEY = env("SECRET_KEY", "change-me")
DEBUG = False  # override in dev.py

ALLOWED_HOSTS = [h.strip() for h in env("ALLOWED_HOSTS", "127.0.0.1,localhost").split(",") if h.strip()]

# ------------------------------------------------------------------------------
# APPS
# ------------------------------------------------------------------------------
DJANGO_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "rest_framework",
    "drf_spectacular",
    "drf_spectacular_sidecar",
]

LOCAL_APPS = [
    "core",
    "faceauth.apps.FaceAuthConfig",
    "payments",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# ------------------------------------------------------------------------------
# MIDDLEWARE
# ------------------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "facepay.urls"
WSGI_APPLICATION = "facepay.wsgi.application"

# ------------------------------------------------------------------------------
# DATABASE
# ------------------------------------------------------------------------------
# Service sans état: les sessions vivent chez le provider liveness.
DATABASES = {}

# ------------------------------------------------------------------------------
# I18N / TZ
# ------------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = env("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

# ------------------------------------------------------------------------------
# STATIC
# ------------------------------------------------------------------------------
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ------------------------------------------------------------------------------
# REST FRAMEWORK (DRF)
# ------------------------------------------------------------------------------
REST_FRAMEWORK = {
    # Pas d'auth applicative: la preuve d'identité est le token biométrique
    "DEFAULT_AUTHENTICATION_CLASSES": (),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
    ),
    "DEFAULT_PARSER_CLASSES": (
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ),
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
}

# Spectacular (OpenAPI)
SPECTACULAR_SETTINGS = {
    "TITLE": env("OPENAPI_TITLE", "FacePay API"),
    "DESCRIPTION": "Paiements conditionnés par Face Liveness (session, autorisation de paiement).",
    "VERSION": env("OPENAPI_VERSION", "1.0.0"),
    "SERVE_INCLUDE_SCHEMA": False,
    "SCHEMA_PATH_PREFIX": r"/api",
    "COMPONENT_SPLIT_REQUEST": True,
    "SERVE_PERMISSIONS": ["rest_framework.permissions.AllowAny"],
    "SERVE_AUTHENTICATION": [],
    "SWAGGER_UI_DIST": "SIDECAR",
    "SWAGGER_UI_FAVICON_HREF": "SIDECAR",
    "REDOC_DIST": "SIDECAR",
}

# ------------------------------------------------------------------------------
# FACE LIVENESS (Amazon Rekognition)
# ------------------------------------------------------------------------------
# Valeurs brutes: le parsing (seuil, credentials) est fait par faceauth.config
FACE_AUTH = {
    "REGION": env("AWS_REGION", ""),
    "ACCESS_KEY_ID": env("AWS_ACCESS_KEY_ID", ""),
    "SECRET_ACCESS_KEY": env("AWS_SECRET_ACCESS_KEY", ""),
    "SESSION_TOKEN": env("AWS_SESSION_TOKEN", ""),
    "MIN_CONFIDENCE": env("AWS_REKOGNITION_FACE_LIVENESS_MIN_CONFIDENCE"),
    "TIMEOUT_S": env("AWS_REKOGNITION_TIMEOUT_S", 10, cast=float),
}

# ------------------------------------------------------------------------------
# OPENPAYMENTS (proxy paiements)
# ------------------------------------------------------------------------------
OPENPAYMENTS = {
    "BASE_URL": env("OPENPAYMENTS_BASE_URL", "https://api.openpayments.guide"),
    "API_KEY": env("OPENPAYMENTS_API_KEY", ""),
    "TIMEOUT_S": env("OPENPAYMENTS_TIMEOUT_S", 10, cast=float),
}

# ------------------------------------------------------------------------------
# SECURITY
# ------------------------------------------------------------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
REFERRER_POLICY = "same-origin"

# ------------------------------------------------------------------------------
# LOGGING (JSON friendly)
# ------------------------------------------------------------------------------
LOG_LEVEL = env("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "logging.Formatter",
            "format": '{"ts":"%(asctime)s","lvl":"%(levelname)s","name":"%(name)s","msg":"%(message)s","module":"%(module)s","line":%(lineno)d}',
        },
        "simple": {"format": "[%(asctime)s] %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if env("LOG_JSON", "1") == "1" else "simple",
        },
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "facepay": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# ------------------------------------------------------------------------------
# API
# ------------------------------------------------------------------------------
API_PREFIX = "api"

# ------------------------------------------------------------------------------
# HEALTHCHECK
# ------------------------------------------------------------------------------
def HEALTH_INFO():
    return {
        "name": "FacePay",
        "version": SPECTACULAR_SETTINGS["VERSION"],
    }

# ------------------------------------------------------------------------------
# TEMPLATES
# ------------------------------------------------------------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]
