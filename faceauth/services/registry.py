from functools import lru_cache

from django.conf import settings

from faceauth.config import resolve_provider_config
from .gateway import FaceAuthGateway


@lru_cache(maxsize=1)
def get_face_auth_gateway() -> FaceAuthGateway:
    """Gateway unique du process, construit depuis settings.FACE_AUTH."""
    return FaceAuthGateway(resolve_provider_config(settings.FACE_AUTH))
