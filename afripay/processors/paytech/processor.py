"""PayTech payment requests (`POST /payment/request-payment`)."""

import json
from typing import Any

import httpx

from afripay.common.errors import AfriPayError, RequestFailedError
from afripay.common.mode import Mode
from afripay.processors.base import PaymentProcessor
from afripay.processors.paytech.schemas import PaytechCheckoutRequest, PaytechPaymentRequest


# One host; the payload's `env` selects sandbox or live.
PAYTECH_BASE_URL = "https://paytech.sn/api"


class PaytechProcessor(PaymentProcessor):
    provider = "paytech"
    display_name = "Paytech"
    credential_fields = ("paytech_api_key", "paytech_api_secret")
    sandbox_base_url = PAYTECH_BASE_URL
    production_base_url = PAYTECH_BASE_URL
    checkout_path = "/payment/request-payment"
    request_model = PaytechCheckoutRequest
    response_model = PaytechPaymentRequest
    failure_message = "Failed to create Paytech payment request"
    reference_field = "ref_command"

    def build_payload(self, request: PaytechCheckoutRequest, mode: Mode) -> dict[str, Any]:
        payload = request.model_dump(exclude_none=True)
        payload["env"] = "test" if mode is Mode.SANDBOX else "prod"
        if isinstance(request.custom_field, dict):
            payload["custom_field"] = json.dumps(request.custom_field)
        return payload

    def build_headers(self, credentials: dict[str, str], access_token: str | None) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "API_KEY": credentials["paytech_api_key"],
            "API_SECRET": credentials["paytech_api_secret"],
        }

    def classify_failure(self, response: httpx.Response, request: PaytechCheckoutRequest) -> AfriPayError:
        if response.status_code == httpx.codes.CONFLICT:
            return RequestFailedError(f"Paytech rejected duplicate ref_command '{request.ref_command}'")
        return super().classify_failure(response, request)
