from rest_framework import serializers

class PaymentIntentInputSerializer(serializers.Serializer):
    # Tous optionnels ici: la présence est contrôlée dans l'ordre par PaymentAuthorizer
    amount = serializers.FloatField(required=False, allow_null=True)
    currency = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=8)
    userId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    faceAuthToken = serializers.CharField(required=False, allow_blank=True, allow_null=True)
