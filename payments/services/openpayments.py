import logging
import time
import uuid
from typing import Optional

import httpx
from django.conf import settings

logger = logging.getLogger("facepay.payments.openpayments")

DEFAULT_BASE_URL = "https://api.openpayments.guide"
SIMULATED_INTENT_PREFIX = "sim_"


class ProxyError(Exception):
    """Échec de communication avec OpenPayments."""


class ProxyUnreachable(ProxyError):
    pass


class OpenPaymentsClient:
    """
    Proxy vers l'API OpenPayments (création d'intents de paiement).
    Sans base URL ou sans API key: intent simulé (simulated=True), aucun appel réseau.
    """

    def __init__(self, base_url: str, api_key: str, timeout_s: float = 10.0,
                 transport: Optional[httpx.BaseTransport] = None) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.api_key = api_key or ""
        self.timeout_s = timeout_s
        self.transport = transport

    @classmethod
    def from_settings(cls) -> "OpenPaymentsClient":
        conf = getattr(settings, "OPENPAYMENTS", {}) or {}
        client = cls(
            base_url=conf.get("BASE_URL") or DEFAULT_BASE_URL,
            api_key=conf.get("API_KEY") or "",
            timeout_s=float(conf.get("TIMEOUT_S") or 10.0),
        )
        if not client.is_configured:
            logger.warning(
                "OPENPAYMENTS_API_KEY is not configured; payment intents will be simulated",
                extra={"event": "payments.proxy_unconfigured"},
            )
        return client

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)

    def _simulated_intent(self, amount, currency: str, user_id: str) -> dict:
        return {
            "intentId": f"{SIMULATED_INTENT_PREFIX}{uuid.uuid4().hex}",
            "status": "simulated",
            "simulated": True,
            "amount": amount,
            "currency": currency,
            "metadata": {"userId": user_id},
        }

    def create_payment_intent(self, *, amount, currency: str, user_id: str) -> dict:
        if not self.is_configured:
            return self._simulated_intent(amount, currency, user_id)

        url = f"{self.base_url}/payments/intents"
        body = {
            "amount": amount,
            "currency": currency,
            "metadata": {"userId": user_id},
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": "FacePay/1.0",
        }

        t0 = time.perf_counter()
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                resp = client.post(url, headers=headers, json=body)
        except httpx.ConnectError as e:
            raise ProxyUnreachable(
                f"Cannot reach the OpenPayments host at {self.base_url}; "
                f"check OPENPAYMENTS_BASE_URL and network access ({e})"
            ) from e
        except httpx.HTTPError as e:
            raise ProxyError(f"OpenPayments request failed: {e}") from e

        duration_ms = int((time.perf_counter() - t0) * 1000)
        if not (200 <= resp.status_code < 300):
            raise ProxyError(f"OpenPayments responded with HTTP {resp.status_code}: {resp.text[:500]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ProxyError(f"OpenPayments returned an invalid JSON body: {e}") from e

        logger.info("payment intent created intent=%s in %dms",
                    data.get("intentId") if isinstance(data, dict) else None, duration_ms)
        return data
