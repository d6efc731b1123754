"""PayDunya checkout invoice creation."""

import asyncio
import json

import httpx
import pytest

from afripay.checkout import pay_with_paydunya
from afripay.common.errors import ErrorKind, MissingCredentialsError, RequestFailedError
from afripay.processors.paydunya.processor import PAYDUNYA_PROD_BASE_URL, PAYDUNYA_SANDBOX_BASE_URL
from afripay.processors.paydunya.schemas import PaydunyaCheckoutRequest


INVOICE_BODY = {
    "response_code": "00",
    "response_text": "https://app.paydunya.com/sandbox-checkout/invoice/test_abc",
    "description": "Checkout invoice successfully created",
    "token": "test_abc",
}


def _request(embedded_mode: str | None = None) -> PaydunyaCheckoutRequest:
    return PaydunyaCheckoutRequest.model_validate(
        {
            "invoice": {"total_amount": 4500, "description": "Order #789"},
            "store": {"name": "TestStore"},
            "mode": embedded_mode,
            "actions": {
                "cancel_url": "https://example.com/cancel",
                "return_url": "https://example.com/success",
                "callback_url": "https://example.com/callback",
            },
            "custom_data": {"orderId": "789"},
        }
    )


@pytest.mark.parametrize(
    "missing",
    ["paydunya_master_key", "paydunya_private_key", "paydunya_token"],
)
def test_each_missing_key_is_named(make_settings, recorder, missing):
    transport = recorder()
    with pytest.raises(MissingCredentialsError) as excinfo:
        asyncio.run(pay_with_paydunya(_request(), "test", make_settings(**{missing: None}), transport))

    assert excinfo.value.kind is ErrorKind.MISSING_CREDENTIALS
    assert excinfo.value.message == f"{missing.upper()} is not set"
    assert transport.requests == []


def test_non_success_status_is_request_failed(make_settings, recorder):
    transport = recorder(httpx.Response(422, json={"error": "Invalid data"}))
    with pytest.raises(RequestFailedError, match="Failed to create Paydunya payment request"):
        asyncio.run(pay_with_paydunya(_request(), "prod", make_settings(), transport))

    sent = transport.requests[0]
    assert str(sent.url) == f"{PAYDUNYA_PROD_BASE_URL}/checkout-invoice/create"
    assert sent.headers["paydunya-master-key"] == "master_key"
    assert sent.headers["paydunya-private-key"] == "priv_key"
    assert sent.headers["paydunya-token"] == "token_value"


def test_sandbox_forces_test_mode(make_settings, recorder):
    """Caller-embedded `live` never reaches the sandbox."""

    transport = recorder(httpx.Response(200, json=INVOICE_BODY))
    result = asyncio.run(pay_with_paydunya(_request("live"), "test", make_settings(), transport))

    sent = transport.requests[0]
    assert str(sent.url) == f"{PAYDUNYA_SANDBOX_BASE_URL}/checkout-invoice/create"
    body = json.loads(sent.content)
    assert body["mode"] == "test"
    assert body["invoice"] == {"total_amount": 4500, "description": "Order #789"}
    assert body["custom_data"] == {"orderId": "789"}
    assert result.to_wire() == INVOICE_BODY


def test_production_forces_live_mode(make_settings, recorder):
    transport = recorder(httpx.Response(200, json=INVOICE_BODY))
    result = asyncio.run(pay_with_paydunya(_request("test"), "prod", make_settings(), transport))

    assert json.loads(transport.requests[0].content)["mode"] == "live"
    assert result.token == "test_abc"


def test_mode_is_added_when_caller_omits_it(make_settings, recorder):
    transport = recorder(httpx.Response(200, json=INVOICE_BODY))
    asyncio.run(pay_with_paydunya(_request(), "prod", make_settings(), transport))
    assert json.loads(transport.requests[0].content)["mode"] == "live"
