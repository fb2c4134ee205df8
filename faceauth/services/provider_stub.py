from .provider import (
    BaseLivenessBackend, VerificationResult, VerificationSession,
    BackendUnavailable, KIND_STUB, KIND_DISABLED, STATUS_SUCCEEDED, STATUS_FAILED,
)

# Tokens considérés comme pré-validés en mode stub
STUB_TOKEN_PREFIX = "valid-"


class StubLivenessBackend(BaseLivenessBackend):
    """
    Backend déterministe sans credentials (AWS_REGION absent):
    - pas de création de session (une session n'a de sens que côté Rekognition)
    - tout token préfixé "valid-" est accepté avec une confiance de 100
    """
    kind = KIND_STUB

    def create_session(self) -> VerificationSession:
        raise BackendUnavailable("Face Liveness integration is not configured (AWS_REGION missing)")

    def fetch_result(self, session_id: str) -> VerificationResult:
        if session_id.startswith(STUB_TOKEN_PREFIX):
            return VerificationResult(session_id=session_id, confidence=100.0, status=STATUS_SUCCEEDED)
        return VerificationResult(session_id=session_id, confidence=0.0, status=STATUS_FAILED)


class DisabledLivenessBackend(BaseLivenessBackend):
    """Région configurée mais client Rekognition impossible à construire."""
    kind = KIND_DISABLED

    def __init__(self, reason: str = "") -> None:
        self.reason = reason

    def _unavailable(self) -> BackendUnavailable:
        msg = "Amazon Rekognition client is unavailable"
        if self.reason:
            msg = f"{msg}: {self.reason}"
        return BackendUnavailable(msg)

    def create_session(self) -> VerificationSession:
        raise self._unavailable()

    def fetch_result(self, session_id: str) -> VerificationResult:
        raise self._unavailable()
