"""PayDunya checkout invoice shapes."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from afripay.processors.base import ProviderResponse


class PaydunyaInvoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_amount: int = Field(gt=0)
    description: str


class PaydunyaStore(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class PaydunyaActions(BaseModel):
    model_config = ConfigDict(frozen=True)

    cancel_url: str
    return_url: str
    callback_url: str


class PaydunyaCheckoutRequest(BaseModel):
    """Checkout invoice payload.

    `mode` may be set by callers but is always replaced by the call's own mode
    on the wire. `custom_data` is echoed back in PayDunya's callbacks.
    """

    model_config = ConfigDict(frozen=True)

    invoice: PaydunyaInvoice
    store: PaydunyaStore
    actions: PaydunyaActions
    custom_data: dict[str, Any] | None = None
    mode: Literal["test", "live"] | None = None


class PaydunyaInvoiceResponse(ProviderResponse):
    """`response_code` "00" means the invoice was created; `token` identifies it."""

    response_code: str
    response_text: str
    description: str | None = None
    token: str | None = None


class PaydunyaWebhookInvoice(BaseModel):
    token: str
    total_amount: int | str
    description: str


class PaydunyaWebhookCustomer(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None


class PaydunyaWebhookData(BaseModel):
    response_code: str
    response_text: str
    hash: str
    invoice: PaydunyaWebhookInvoice
    custom_data: dict[str, Any] | None = None
    actions: PaydunyaActions
    mode: str
    status: str
    customer: PaydunyaWebhookCustomer | None = None
    receipt_url: str | None = None


class PaydunyaWebhookPayload(ProviderResponse):
    """IPN body PayDunya posts to `actions.callback_url` (declared only, hash not checked)."""

    data: PaydunyaWebhookData
