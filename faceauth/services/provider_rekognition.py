import logging
import time

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .provider import (
    BaseLivenessBackend, VerificationResult, VerificationSession,
    MalformedBackendResponse, BackendTransportError, KIND_VENDOR, STATUS_UNKNOWN,
)

logger = logging.getLogger("facepay.faceauth.rekognition")


class RekognitionLivenessBackend(BaseLivenessBackend):
    """
    Connecteur Amazon Rekognition Face Liveness.
    - CreateFaceLivenessSession -> SessionId (le composant UI s'y attache)
    - GetFaceLivenessSessionResults -> Status + Confidence
    Les erreurs réseau/service sont converties en BackendTransportError.
    """
    kind = KIND_VENDOR

    def __init__(self, client) -> None:
        self.client = client

    @classmethod
    def from_config(cls, config, client_factory=boto3.client) -> "RekognitionLivenessBackend":
        boto_config = Config(
            connect_timeout=config.timeout_s,
            read_timeout=config.timeout_s,
            retries={"max_attempts": 2, "mode": "standard"},
        )
        client = client_factory("rekognition", config=boto_config, **config.client_kwargs())
        return cls(client)

    def create_session(self) -> VerificationSession:
        t0 = time.perf_counter()
        try:
            resp = self.client.create_face_liveness_session()
        except (ClientError, BotoCoreError) as e:
            raise BackendTransportError(f"CreateFaceLivenessSession failed: {e}") from e

        session_id = (resp or {}).get("SessionId")
        if not session_id:
            raise MalformedBackendResponse("Rekognition did not return a SessionId for the Face Liveness session")

        logger.debug("liveness session created in %dms", int((time.perf_counter() - t0) * 1000))
        return VerificationSession(session_id=session_id)

    def fetch_result(self, session_id: str) -> VerificationResult:
        try:
            resp = self.client.get_face_liveness_session_results(SessionId=session_id)
        except (ClientError, BotoCoreError) as e:
            raise BackendTransportError(f"GetFaceLivenessSessionResults failed: {e}") from e

        resp = resp or {}
        raw_confidence = resp.get("Confidence")
        try:
            confidence = float(raw_confidence) if raw_confidence is not None else 0.0
        except (TypeError, ValueError):
            raise MalformedBackendResponse(f"Invalid Confidence value: {raw_confidence!r}")

        return VerificationResult(
            session_id=session_id,
            confidence=confidence,
            status=resp.get("Status") or STATUS_UNKNOWN,
        )
