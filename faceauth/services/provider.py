"""
Contrat provider-agnostic pour les sessions Face Liveness.
Trois variantes fermées: vendor (Rekognition), stub (dev local), disabled.
Le choix est fait une seule fois par FaceAuthGateway.
"""
from dataclasses import dataclass

STATUS_SUCCEEDED = "SUCCEEDED"
STATUS_FAILED = "FAILED"
STATUS_IN_PROGRESS = "IN_PROGRESS"
STATUS_UNKNOWN = "UNKNOWN"

KIND_VENDOR = "vendor"
KIND_STUB = "stub"
KIND_DISABLED = "disabled"


class LivenessBackendError(Exception):
    """Base des erreurs backend liveness."""


class BackendUnavailable(LivenessBackendError):
    pass


class MalformedBackendResponse(LivenessBackendError):
    pass


class BackendTransportError(LivenessBackendError):
    pass


@dataclass(frozen=True)
class VerificationSession:
    session_id: str


@dataclass(frozen=True)
class VerificationResult:
    session_id: str
    confidence: float = 0.0      # [0, 100], probabilité de liveness
    status: str = STATUS_UNKNOWN  # 'SUCCEEDED' | 'FAILED' | 'IN_PROGRESS' | 'UNKNOWN' ...


class BaseLivenessBackend:
    kind: str = ""

    def create_session(self) -> VerificationSession:
        raise NotImplementedError

    def fetch_result(self, session_id: str) -> VerificationResult:
        raise NotImplementedError
