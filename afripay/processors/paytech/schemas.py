"""PayTech payment request shapes."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from afripay.processors.base import ProviderResponse


PaytechPaymentMethod = Literal[
    "Orange Money",
    "Orange Money CI",
    "Orange Money ML",
    "Mtn Money CI",
    "Moov Money CI",
    "Moov Money ML",
    "Wave",
    "Wave CI",
    "Wizall",
    "Carte Bancaire",
    "Emoney",
    "Tigo Cash",
    "Free Money",
    "Moov Money BJ",
    "Mtn Money BJ",
]
PaytechCurrency = Literal["XOF", "EUR", "USD", "CAD", "GBP", "MAD"]


class PaytechCheckoutRequest(BaseModel):
    """Payment request payload.

    Callback URLs must be HTTPS for PayTech to accept them. `custom_field` is a
    JSON string on the wire; a mapping is encoded for you. `env` is always
    replaced by the call's mode.
    """

    model_config = ConfigDict(frozen=True)

    item_name: str
    item_price: int = Field(gt=0)
    ref_command: str
    command_name: str
    currency: PaytechCurrency = "XOF"
    env: Literal["test", "prod"] | None = None
    ipn_url: str | None = None
    success_url: str | None = None
    cancel_url: str | None = None
    custom_field: str | dict[str, Any] | None = None
    target_payment: list[PaytechPaymentMethod] | None = None
    refund_notif_url: str | None = None


class PaytechPaymentRequest(ProviderResponse):
    """PayTech answer; PayTech also echoes the redirect as `redirectUrl` (kept as extra)."""

    success: int
    token: str | None = None
    redirect_url: str | None = None


class PaytechWebhookPayload(ProviderResponse):
    """IPN body PayTech posts to `ipn_url` (declared only, hashes not checked)."""

    custom_field: Any = None
    currency: str
    api_key_sha256: str
    api_secret_sha256: str
    type_event: str
    ref_command: str
    item_name: str
    item_price: str
    command_name: str
    token: str
    env: str
    payment_method: str
    client_phone: str | None = None
