from django.apps import AppConfig


class FaceAuthConfig(AppConfig):
    name = "faceauth"
    verbose_name = "Face Liveness"

    def ready(self):
        # Résolution config + choix du backend au démarrage (warnings visibles tout de suite)
        from .services.registry import get_face_auth_gateway
        get_face_auth_gateway()
