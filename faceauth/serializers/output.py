from rest_framework import serializers

class SessionDataSerializer(serializers.Serializer):
    sessionId = serializers.CharField()

class SessionOutputSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = SessionDataSerializer()

class ErrorOutputSerializer(serializers.Serializer):
    message = serializers.CharField()
