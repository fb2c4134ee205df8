from django.urls import path

from payments.views.intent import PaymentIntentView

urlpatterns = [
    path("", PaymentIntentView.as_view(), name="payment-intent"),
]
