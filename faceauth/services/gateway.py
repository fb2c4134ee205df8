import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError

from faceauth.config import ProviderConfig
from .provider import (
    BaseLivenessBackend, VerificationResult, LivenessBackendError,
    KIND_STUB, STATUS_SUCCEEDED,
)
from .provider_rekognition import RekognitionLivenessBackend
from .provider_stub import StubLivenessBackend, DisabledLivenessBackend

logger = logging.getLogger("facepay.faceauth.gateway")


def is_admitted(result: VerificationResult, threshold: float) -> bool:
    """Décision d'admission, identique quel que soit le backend."""
    return result.status == STATUS_SUCCEEDED and result.confidence >= threshold


def select_backend(config: ProviderConfig, client_factory=boto3.client,
                   log: Optional[logging.Logger] = None) -> BaseLivenessBackend:
    """
    Choix unique du backend, au démarrage:
    - pas de région -> stub (vérification simulée, pas de création de session)
    - région + client OK -> Rekognition
    - région + client en échec -> disabled
    """
    log = log or logger
    if not config.has_region:
        return StubLivenessBackend()
    try:
        return RekognitionLivenessBackend.from_config(config, client_factory=client_factory)
    except (BotoCoreError, ValueError) as e:
        log.warning(
            "Amazon Rekognition client could not be created (%s); Face Liveness is disabled", e,
            extra={"event": "faceauth.vendor_unavailable"},
        )
        return DisabledLivenessBackend(reason=str(e))


class FaceAuthGateway:
    """
    Orchestrateur Face Liveness:
    - create_session(): réservé au backend Rekognition, lève BackendUnavailable sinon
    - verify(user_id, token): booléen, ne lève jamais pour une erreur backend (fail closed)
    Sans état mutable: backend et seuil sont figés à la construction.
    """

    def __init__(self, config: ProviderConfig, backend: Optional[BaseLivenessBackend] = None,
                 client_factory=boto3.client, log: Optional[logging.Logger] = None) -> None:
        self.config = config
        self.log = log or logger
        self.backend = backend or select_backend(config, client_factory=client_factory, log=self.log)

    @property
    def backend_kind(self) -> str:
        return self.backend.kind

    @property
    def threshold(self) -> float:
        return self.config.min_confidence

    def create_session(self) -> str:
        session = self.backend.create_session()
        self.log.info("Face Liveness session created: %s", session.session_id)
        return session.session_id

    def verify(self, user_id: str, token: str) -> bool:
        if not user_id or not token:
            return False

        if self.backend.kind == KIND_STUB:
            self.log.warning(
                "Face Liveness verification is simulated (no AWS_REGION); user=%s", user_id,
                extra={"event": "faceauth.stub_verification"},
            )

        try:
            result = self.backend.fetch_result(token)
        except LivenessBackendError as e:
            self.log.warning(
                "Face Liveness verification failed for user=%s: %s", user_id, e,
                extra={"event": "faceauth.verification_error"},
            )
            return False
        except Exception:
            # verify reste booléen: toute autre erreur backend vaut refus
            self.log.exception(
                "Unexpected error during Face Liveness verification for user=%s", user_id,
                extra={"event": "faceauth.verification_error"},
            )
            return False

        admitted = is_admitted(result, self.threshold)
        self.log.info(
            "Face Liveness result user=%s status=%s confidence=%.2f threshold=%.2f admitted=%s",
            user_id, result.status, result.confidence, self.threshold, admitted,
        )
        return admitted
