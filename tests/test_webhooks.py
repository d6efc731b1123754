"""Webhook payload shapes are plain typed declarations."""

from afripay.processors.orange_money.schemas import OrangeMoneyWebhookNotification
from afripay.processors.paydunya.schemas import PaydunyaWebhookPayload
from afripay.processors.paytech.schemas import PaytechWebhookPayload
from afripay.processors.wave.schemas import WaveWebhookEvent


def test_wave_event():
    event = WaveWebhookEvent.model_validate(
        {
            "id": "EV_1",
            "type": "checkout.session.completed",
            "data": {
                "id": "cos_1",
                "checkout_status": "complete",
                "wave_launch_url": "https://pay.wave.com/c/cos_1",
                "payment_status": "succeeded",
            },
        }
    )
    assert event.data.checkout_status == "complete"


def test_orange_money_notification_uses_wire_names():
    notification = OrangeMoneyWebhookNotification.model_validate(
        {
            "amount": {"unit": "XOF", "value": "1000"},
            "partner": {"id": "123456", "idType": "CODE"},
            "customer": {"id": "771234567", "idType": "MSISDN"},
            "reference": "ref_1",
            "type": "MERCHANT_PAYMENT",
            "channel": "API",
            "transactionId": "MP250603.0001.A00001",
            "paymentMethod": "QRCODE",
            "detail": None,
            "createdAt": "2025-06-03T00:00:00Z",
            "metadata": {"orderId": "1234"},
            "status": "SUCCESS",
        }
    )
    assert notification.transaction_id == "MP250603.0001.A00001"
    assert notification.customer.id_type == "MSISDN"


def test_paydunya_payload():
    payload = PaydunyaWebhookPayload.model_validate(
        {
            "data": {
                "response_code": "00",
                "response_text": "Transaction Found",
                "hash": "abc",
                "invoice": {"token": "tok", "total_amount": 4500, "description": "Order #789"},
                "custom_data": {"orderId": "789"},
                "actions": {
                    "cancel_url": "https://example.com/cancel",
                    "callback_url": "https://example.com/callback",
                    "return_url": "https://example.com/success",
                },
                "mode": "test",
                "status": "completed",
                "customer": {"name": "Awa", "phone": "771234567", "email": "awa@example.com"},
                "receipt_url": "https://app.paydunya.com/receipt/tok",
            }
        }
    )
    assert payload.data.invoice.token == "tok"


def test_paytech_payload_keeps_custom_field_raw():
    payload = PaytechWebhookPayload.model_validate(
        {
            "custom_field": '{"user_id": "42"}',
            "currency": "XOF",
            "api_key_sha256": "a" * 64,
            "api_secret_sha256": "b" * 64,
            "type_event": "sale_complete",
            "ref_command": "CMD_42",
            "item_name": "iPhone 15",
            "item_price": "560000",
            "command_name": "Order CMD_42",
            "token": "405gzopzkd2l0lz",
            "env": "test",
            "payment_method": "Wave",
            "client_phone": "771234567",
        }
    )
    assert payload.custom_field == '{"user_id": "42"}'
