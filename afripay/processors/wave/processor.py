"""Wave checkout sessions (`POST /v1/checkout/sessions`, bearer auth)."""

from typing import Any

from afripay.common.mode import Mode, charge_amount
from afripay.processors.base import PaymentProcessor
from afripay.processors.wave.schemas import WaveCheckoutRequest, WaveCheckoutSession


# Wave has no separate sandbox host; sandbox keys are issued per business.
WAVE_BASE_URL = "https://api.wave.com"
WAVE_SANDBOX_AMOUNT = 1


class WaveProcessor(PaymentProcessor):
    """Creates Wave checkout sessions.

    Sandbox calls always charge `WAVE_SANDBOX_AMOUNT` whatever the request
    says, so test sessions never move real funds.
    """

    provider = "wave"
    display_name = "Wave"
    credential_fields = ("wave_api_key",)
    sandbox_base_url = WAVE_BASE_URL
    production_base_url = WAVE_BASE_URL
    checkout_path = "/v1/checkout/sessions"
    request_model = WaveCheckoutRequest
    response_model = WaveCheckoutSession
    failure_message = "Failed to create Wave checkout session"
    reference_field = "client_reference"

    def build_payload(self, request: WaveCheckoutRequest, mode: Mode) -> dict[str, Any]:
        payload = request.model_dump(exclude_none=True)
        payload["amount"] = charge_amount(mode, request.amount, WAVE_SANDBOX_AMOUNT)
        return payload

    def build_headers(self, credentials: dict[str, str], access_token: str | None) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credentials['wave_api_key']}",
            "Content-Type": "application/json",
        }
