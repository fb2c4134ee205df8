from rest_framework import serializers

class PaymentIntentOutputSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = serializers.DictField()  # réponse OpenPayments: {"intentId", "status", "approvalUrl"?, "simulated"?}
