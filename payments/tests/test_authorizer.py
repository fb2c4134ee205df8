import httpx
from django.test import SimpleTestCase

from faceauth.config import ProviderConfig
from faceauth.services.gateway import FaceAuthGateway
from payments.services.authorizer import (
    PaymentAuthorizer, MSG_AMOUNT_CURRENCY_REQUIRED, MSG_USER_ID_REQUIRED,
    MSG_TOKEN_REQUIRED, MSG_FACE_AUTH_FAILED,
)
from payments.services.openpayments import OpenPaymentsClient, ProxyUnreachable


class CountingGateway:
    def __init__(self, admit=True):
        self.admit = admit
        self.calls = []

    def verify(self, user_id, token):
        self.calls.append((user_id, token))
        return self.admit


class RecordingPayments:
    def __init__(self):
        self.calls = []

    def create_payment_intent(self, *, amount, currency, user_id):
        self.calls.append((amount, currency, user_id))
        return {"intentId": "pi_1", "status": "pending"}


class PaymentAuthorizerTest(SimpleTestCase):
    def setUp(self):
        self.gateway = CountingGateway()
        self.payments = RecordingPayments()
        self.authorizer = PaymentAuthorizer(self.gateway, self.payments)

    def _authorize(self, amount=50, currency="USD", user_id="u1", token="valid-x"):
        return self.authorizer.authorize(amount=amount, currency=currency, user_id=user_id,
                                         face_auth_token=token)

    def test_structural_checks_in_order_without_verification(self):
        cases = [
            (dict(amount=None, currency=None, user_id="", token=""), MSG_AMOUNT_CURRENCY_REQUIRED),
            (dict(amount=50, currency="", user_id="", token=""), MSG_AMOUNT_CURRENCY_REQUIRED),
            (dict(amount=0, currency="USD"), MSG_AMOUNT_CURRENCY_REQUIRED),
            (dict(user_id="", token=""), MSG_USER_ID_REQUIRED),
            (dict(user_id=None), MSG_USER_ID_REQUIRED),
            (dict(token=""), MSG_TOKEN_REQUIRED),
            (dict(token=None), MSG_TOKEN_REQUIRED),
        ]
        for kwargs, message in cases:
            res = self._authorize(**kwargs)
            self.assertEqual(res.status_code, 400, kwargs)
            self.assertEqual(res.message, message, kwargs)
        self.assertEqual(self.gateway.calls, [])
        self.assertEqual(self.payments.calls, [])

    def test_verification_failure_is_401(self):
        self.gateway.admit = False
        res = self._authorize()
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.message, MSG_FACE_AUTH_FAILED)
        self.assertEqual(self.gateway.calls, [("u1", "valid-x")])
        self.assertEqual(self.payments.calls, [])

    def test_authorized(self):
        res = self._authorize()
        self.assertTrue(res.authorized)
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["intentId"], "pi_1")
        self.assertEqual(self.payments.calls, [(50, "USD", "u1")])


class PaymentAuthorizerScenarioTest(SimpleTestCase):
    """Gateway stub (pas de région) + proxy réel ou simulé."""

    def setUp(self):
        self.gateway = FaceAuthGateway(ProviderConfig(region=""))

    def test_simulated_intent(self):
        authorizer = PaymentAuthorizer(self.gateway, OpenPaymentsClient("https://api.openpayments.guide", ""))
        res = authorizer.authorize(amount=50, currency="USD", user_id="u1", face_auth_token="valid-x")
        self.assertEqual(res.status_code, 201)
        self.assertTrue(res.data["simulated"])
        self.assertTrue(res.data["intentId"].startswith("sim_"))

    def test_bogus_token_denied(self):
        authorizer = PaymentAuthorizer(self.gateway, OpenPaymentsClient("https://api.openpayments.guide", ""))
        res = authorizer.authorize(amount=50, currency="USD", user_id="u1", face_auth_token="bogus")
        self.assertEqual(res.status_code, 401)

    def test_proxy_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        payments = OpenPaymentsClient("https://down.example.test", "key", transport=httpx.MockTransport(handler))
        authorizer = PaymentAuthorizer(self.gateway, payments)
        with self.assertRaises(ProxyUnreachable):
            authorizer.authorize(amount=50, currency="USD", user_id="u1", face_auth_token="valid-x")
