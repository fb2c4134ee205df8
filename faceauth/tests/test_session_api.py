from unittest import mock

from django.test import SimpleTestCase, Client

from faceauth.config import ProviderConfig
from faceauth.services.gateway import FaceAuthGateway
from faceauth.services.provider import (
    BaseLivenessBackend, VerificationSession, BackendUnavailable, MalformedBackendResponse,
)

PATH = "/api/face-auth/session"


class StaticSessionBackend(BaseLivenessBackend):
    kind = "vendor"

    def __init__(self, session_id=None, error=None):
        self.session_id = session_id
        self.error = error

    def create_session(self):
        if self.error:
            raise self.error
        return VerificationSession(session_id=self.session_id)


class FaceAuthSessionApiTest(SimpleTestCase):
    def setUp(self):
        self.client = Client()

    def _patch_gateway(self, backend):
        gateway = FaceAuthGateway(ProviderConfig(region="us-east-1"), backend=backend)
        patcher = mock.patch("faceauth.views.session.get_face_auth_gateway", return_value=gateway)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_created(self):
        self._patch_gateway(StaticSessionBackend(session_id="sess-123"))
        resp = self.client.post(PATH)
        self.assertEqual(resp.status_code, 201, resp.content)
        data = resp.json()
        self.assertIn("message", data)
        self.assertEqual(data["data"], {"sessionId": "sess-123"})

    def test_malformed_backend_response(self):
        self._patch_gateway(StaticSessionBackend(error=MalformedBackendResponse("no SessionId")))
        resp = self.client.post(PATH)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "no SessionId"})

    def test_unavailable_without_region(self):
        # settings de test: AWS_REGION vide -> backend stub, pas de session possible
        resp = self.client.post(PATH)
        self.assertEqual(resp.status_code, 500)
        self.assertIn("not configured", resp.json()["message"])

    def test_error_without_message_uses_default(self):
        self._patch_gateway(StaticSessionBackend(error=BackendUnavailable()))
        resp = self.client.post(PATH)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Unknown error while creating the Face Liveness session"})
