from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from faceauth.serializers.output import ErrorOutputSerializer
from ..serializers.input import PaymentIntentInputSerializer
from ..serializers.output import PaymentIntentOutputSerializer
from ..services.authorizer import get_payment_authorizer


@extend_schema(
    tags=["Payments"],
    request=PaymentIntentInputSerializer,
    responses={
        201: OpenApiResponse(response=PaymentIntentOutputSerializer, description="Intent de paiement créé"),
        400: OpenApiResponse(response=ErrorOutputSerializer, description="Champ obligatoire manquant"),
        401: OpenApiResponse(response=ErrorOutputSerializer, description="Validation biométrique échouée"),
        500: OpenApiResponse(response=ErrorOutputSerializer, description="Erreur proxy OpenPayments"),
    },
    examples=[
        OpenApiExample(
            "Exemple requête",
            value={"amount": 50, "currency": "USD", "userId": "u1", "faceAuthToken": "<sessionId>"},
            request_only=True,
        ),
        OpenApiExample(
            "Exemple réponse (proxy non configuré)",
            value={
                "message": "Payment intent created",
                "data": {"intentId": "sim_3f2a...", "status": "simulated", "simulated": True,
                         "amount": 50, "currency": "USD", "metadata": {"userId": "u1"}},
            },
            response_only=True,
            status_codes=["201"],
        ),
    ],
)
class PaymentIntentView(APIView):
    """
    POST /payments
    Crée un intent OpenPayments après validation des champs puis du token Face Liveness.
    """
    serializer_class = PaymentIntentInputSerializer

    def post(self, request):
        ser = self.serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        res = get_payment_authorizer().authorize(
            amount=data.get("amount"),
            currency=data.get("currency"),
            user_id=data.get("userId"),
            face_auth_token=data.get("faceAuthToken"),
        )

        body = {"message": res.message}
        if res.data is not None:
            body["data"] = res.data
        return Response(body, status=res.status_code)
