"""
Configuration du provider liveness, résolue une seule fois au démarrage.
Les valeurs brutes viennent de settings.FACE_AUTH (assemblé depuis l'env).
"""
import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MIN_CONFIDENCE = 80.0
DEFAULT_TIMEOUT_S = 10.0

logger = logging.getLogger("facepay.faceauth.config")

# Préfixe numérique accepté (ex: "85", "85.5", "-5", "1e2", "85abc" -> 85)
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_confidence_threshold(raw_value: Optional[str], fallback: float) -> float:
    """
    Seuil de confiance configuré, ou `fallback` si absent/vide/non numérique.
    Pas de clamp sur [0, 100]: un seuil hors échelle est accepté tel quel.
    """
    if not raw_value:
        return fallback
    m = _NUMERIC_PREFIX.match(str(raw_value).strip())
    if not m:
        return fallback
    return float(m.group(0))


@dataclass(frozen=True)
class ProviderConfig:
    region: str
    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def has_region(self) -> bool:
        return bool(self.region)

    @property
    def has_static_credentials(self) -> bool:
        # un session_token seul ne suffit pas
        return bool(self.access_key_id and self.secret_access_key)

    def client_kwargs(self) -> dict:
        kwargs = {"region_name": self.region}
        if self.has_static_credentials:
            kwargs["aws_access_key_id"] = self.access_key_id
            kwargs["aws_secret_access_key"] = self.secret_access_key
            if self.session_token:
                kwargs["aws_session_token"] = self.session_token
        return kwargs


def resolve_provider_config(raw: Mapping, log: Optional[logging.Logger] = None) -> ProviderConfig:
    """
    Assemble le ProviderConfig à partir du mapping brut (settings.FACE_AUTH).
    Ne choisit pas le backend: c'est le rôle de FaceAuthGateway.
    """
    log = log or logger
    region = (raw.get("REGION") or "").strip()
    timeout_s = raw.get("TIMEOUT_S")

    config = ProviderConfig(
        region=region,
        min_confidence=parse_confidence_threshold(raw.get("MIN_CONFIDENCE"), DEFAULT_MIN_CONFIDENCE),
        access_key_id=raw.get("ACCESS_KEY_ID") or None,
        secret_access_key=raw.get("SECRET_ACCESS_KEY") or None,
        session_token=raw.get("SESSION_TOKEN") or None,
        timeout_s=float(timeout_s) if timeout_s else DEFAULT_TIMEOUT_S,
    )

    if not config.has_region:
        log.warning(
            "AWS_REGION is not configured; Rekognition Face Liveness will run in simulated mode",
            extra={"event": "faceauth.region_missing"},
        )
    return config
