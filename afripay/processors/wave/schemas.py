"""Wave checkout session request/response and webhook shapes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from afripay.processors.base import ProviderResponse


CheckoutStatus = Literal["open", "complete", "expired"]


class WaveCheckoutRequest(BaseModel):
    """Checkout session creation payload accepted from callers."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(gt=0)
    currency: Literal["XOF"] = "XOF"
    error_url: str
    success_url: str
    client_reference: str | None = None
    restrict_payer_mobile: str | None = None


class WaveCheckoutSession(ProviderResponse):
    """Checkout session as returned by Wave; redirect the payer to `wave_launch_url`."""

    id: str
    amount: str | None = None
    checkout_status: CheckoutStatus
    client_reference: str | None = None
    currency: str | None = None
    error_url: str | None = None
    last_payment_error: str | dict | None = None
    business_name: str | None = None
    payment_status: str | None = None
    transaction_id: str | None = None
    aggregated_merchant_id: str | None = None
    success_url: str | None = None
    wave_launch_url: str
    when_completed: str | None = None
    when_created: str | None = None
    when_expires: str | None = None


class WaveWebhookEvent(ProviderResponse):
    """Event Wave posts to the merchant webhook (declared only, never verified here)."""

    id: str
    type: str
    data: WaveCheckoutSession
