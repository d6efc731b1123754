"""Orange Money QR code / deeplink payments.

Two exchanges per call: a form-encoded OAuth client-credentials grant on
`/oauth/v1/token`, then the payment intent on `/api/eWallet/v4/qrcode` with
the freshly issued bearer token. The token is dropped when the call returns.
"""

from typing import Any

import httpx

from afripay.common.errors import RequestFailedError
from afripay.common.logging import logger
from afripay.common.mode import Mode, charge_amount
from afripay.processors.base import PaymentProcessor
from afripay.processors.orange_money.schemas import (
    OrangeMoneyAccessToken,
    OrangeMoneyCheckoutRequest,
    OrangeMoneyQrCode,
)


OM_PROD_BASE_URL = "https://api.orange-sonatel.com"
OM_SANDBOX_BASE_URL = "https://api.sandbox.orange-sonatel.com"
OM_SANDBOX_AMOUNT = 10
VALIDITY_LIMIT = 86_400
METADATA_LIMIT = 10


class OrangeMoneyProcessor(PaymentProcessor):
    """Issues Orange Money payment intents (deeplink or Base64 QR code)."""

    provider = "orange_money"
    display_name = "Orange Money"
    credential_fields = ("om_client_id", "om_client_secret")
    optional_fields = ("om_callback_url",)
    sandbox_base_url = OM_SANDBOX_BASE_URL
    production_base_url = OM_PROD_BASE_URL
    checkout_path = "/api/eWallet/v4/qrcode"
    token_path = "/oauth/v1/token"
    request_model = OrangeMoneyCheckoutRequest
    response_model = OrangeMoneyQrCode
    failure_message = "Failed to create Orange Money QR code"

    def validate_request(self, request: OrangeMoneyCheckoutRequest) -> None:
        # Rejected rather than clamped.
        if request.metadata and len(request.metadata) > METADATA_LIMIT:
            raise RequestFailedError(f"Metadata can't be more than {METADATA_LIMIT} items")
        if request.validity > VALIDITY_LIMIT:
            raise RequestFailedError(f"Validity can't be more than {VALIDITY_LIMIT} seconds")

    def build_payload(self, request: OrangeMoneyCheckoutRequest, mode: Mode) -> dict[str, Any]:
        payload = request.model_dump(by_alias=True, exclude_none=True)
        payload["amount"]["value"] = charge_amount(mode, request.amount.value, OM_SANDBOX_AMOUNT)
        return payload

    def build_headers(self, credentials: dict[str, str], access_token: str | None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        if "om_callback_url" in credentials:
            headers["X-Callback-Url"] = credentials["om_callback_url"]
        return headers

    async def authenticate(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        credentials: dict[str, str],
    ) -> str:
        response = await self._send(
            client,
            f"{base_url}{self.token_path}",
            headers={"Content-Type": "application/x-www-form-urlencoded;charset=UTF-8"},
            data={
                "grant_type": "client_credentials",
                "client_id": credentials["om_client_id"],
                "client_secret": credentials["om_client_secret"],
            },
        )
        if not response.is_success:
            logger.warning(
                "token_exchange_rejected provider=%s status=%s",
                self.provider,
                response.status_code,
            )
            raise RequestFailedError("Failed to get access token from Orange Money")
        token = self._map_response(response, OrangeMoneyAccessToken)
        return token.access_token
