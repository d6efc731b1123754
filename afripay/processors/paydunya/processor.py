"""PayDunya checkout invoices (`POST /checkout-invoice/create`)."""

from typing import Any

from afripay.common.mode import Mode
from afripay.processors.base import PaymentProcessor
from afripay.processors.paydunya.schemas import PaydunyaCheckoutRequest, PaydunyaInvoiceResponse


PAYDUNYA_SANDBOX_BASE_URL = "https://app.paydunya.com/sandbox-api/v1"
PAYDUNYA_PROD_BASE_URL = "https://app.paydunya.com/api/v1"


def paydunya_mode(mode: Mode) -> str:
    """PayDunya's own environment flag for the invoice."""

    return "test" if mode is Mode.SANDBOX else "live"


class PaydunyaProcessor(PaymentProcessor):
    provider = "paydunya"
    display_name = "Paydunya"
    credential_fields = ("paydunya_master_key", "paydunya_private_key", "paydunya_token")
    sandbox_base_url = PAYDUNYA_SANDBOX_BASE_URL
    production_base_url = PAYDUNYA_PROD_BASE_URL
    checkout_path = "/checkout-invoice/create"
    request_model = PaydunyaCheckoutRequest
    response_model = PaydunyaInvoiceResponse
    failure_message = "Failed to create Paydunya payment request"

    def build_payload(self, request: PaydunyaCheckoutRequest, mode: Mode) -> dict[str, Any]:
        payload = request.model_dump(exclude_none=True)
        payload["mode"] = paydunya_mode(mode)
        return payload

    def build_headers(self, credentials: dict[str, str], access_token: str | None) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "PAYDUNYA-MASTER-KEY": credentials["paydunya_master_key"],
            "PAYDUNYA-PRIVATE-KEY": credentials["paydunya_private_key"],
            "PAYDUNYA-TOKEN": credentials["paydunya_token"],
        }
