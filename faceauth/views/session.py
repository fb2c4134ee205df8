import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from ..serializers.output import SessionOutputSerializer, ErrorOutputSerializer
from ..services.provider import LivenessBackendError
from ..services.registry import get_face_auth_gateway

logger = logging.getLogger("facepay.faceauth.views")


@extend_schema(
    tags=["Face Liveness"],
    request=None,
    responses={
        201: OpenApiResponse(response=SessionOutputSerializer, description="Session Face Liveness créée"),
        500: OpenApiResponse(response=ErrorOutputSerializer, description="Backend indisponible ou réponse invalide"),
    },
    examples=[
        OpenApiExample(
            "Exemple réponse",
            value={
                "message": "Face Liveness session created",
                "data": {"sessionId": "0f9b9f0e-3c4d-4a55-9b1a-7d2f6b1c2e3a"},
            },
            response_only=True,
            status_codes=["201"],
        ),
    ],
)
class FaceAuthSessionView(APIView):
    """
    POST /face-auth/session
    Crée une session Rekognition Face Liveness à laquelle le composant de capture s'attache.
    Pas de stub: sans backend Rekognition la création échoue (500).
    """
    def post(self, request):
        gateway = get_face_auth_gateway()
        try:
            session_id = gateway.create_session()
        except LivenessBackendError as e:
            logger.error("Face Liveness session creation failed: %s", e)
            message = str(e) or "Unknown error while creating the Face Liveness session"
            return Response({"message": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            "message": "Face Liveness session created",
            "data": {"sessionId": session_id},
        }, status=status.HTTP_201_CREATED)
