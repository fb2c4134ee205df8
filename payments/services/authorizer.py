import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from faceauth.services.gateway import FaceAuthGateway
from faceauth.services.registry import get_face_auth_gateway
from .openpayments import OpenPaymentsClient

logger = logging.getLogger("facepay.payments.authorizer")

MSG_AMOUNT_CURRENCY_REQUIRED = "amount and currency are required"
MSG_USER_ID_REQUIRED = "userId is required to start the payment"
MSG_TOKEN_REQUIRED = "faceAuthToken is missing; it must be validated by the face recognition service"
MSG_FACE_AUTH_FAILED = "Biometric verification failed; the payment was not processed"
MSG_INTENT_CREATED = "Payment intent created"


@dataclass
class PaymentAuthorization:
    status_code: int
    message: str
    data: Optional[dict] = None

    @property
    def authorized(self) -> bool:
        return self.status_code == 201


class PaymentAuthorizer:
    """
    Contrôle d'accès au proxy paiements, dans cet ordre (fail fast):
      1) amount + currency  2) user_id  3) face_auth_token   -> 400
      4) FaceAuthGateway.verify(user_id, token)             -> 401
      5) OpenPayments.create_payment_intent                  -> 201
    La validation structurelle précède toujours l'appel biométrique.
    Les ProxyError remontent à l'appelant (500).
    """

    def __init__(self, gateway: FaceAuthGateway, payments: OpenPaymentsClient) -> None:
        self.gateway = gateway
        self.payments = payments

    def authorize(self, *, amount, currency, user_id, face_auth_token) -> PaymentAuthorization:
        if not amount or not currency:
            return PaymentAuthorization(400, MSG_AMOUNT_CURRENCY_REQUIRED)
        if not user_id:
            return PaymentAuthorization(400, MSG_USER_ID_REQUIRED)
        if not face_auth_token:
            return PaymentAuthorization(400, MSG_TOKEN_REQUIRED)

        if not self.gateway.verify(user_id, face_auth_token):
            logger.info("payment denied: face verification failed for user=%s", user_id)
            return PaymentAuthorization(401, MSG_FACE_AUTH_FAILED)

        intent = self.payments.create_payment_intent(amount=amount, currency=currency, user_id=user_id)
        return PaymentAuthorization(201, MSG_INTENT_CREATED, data=intent)


@lru_cache(maxsize=1)
def get_payment_authorizer() -> PaymentAuthorizer:
    return PaymentAuthorizer(get_face_auth_gateway(), OpenPaymentsClient.from_settings())
